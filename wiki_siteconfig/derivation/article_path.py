"""Validate the article path template and split it into URI parts.

The template (``$wgArticlePath`` style, e.g. ``/wiki/$1``) is appended to the
server origin. The part of the resulting URL up to the last ``/`` is the base
URI every page link resolves against; the remainder, prefixed with ``.``, is
what a relative link to another page starts with.

Examples
--------
>>> shape = resolve_article_path("/wiki/$1", "https://localhost")
>>> shape.base_uri, shape.relative_link_prefix
('https://localhost/wiki/', './')
>>> resolve_article_path("/w/index.php?title=$1", "//example.org").relative_link_prefix
'./index.php?title='
"""

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit, urlunsplit

from wiki_siteconfig._constants import TITLE_PLACEHOLDER
from wiki_siteconfig.config.models import ArticlePathShape, ConfigurationError, ErrorKind


def _malformed(message: str) -> ConfigurationError:
    return ConfigurationError(ErrorKind.MALFORMED_PATH, message)


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments as described in RFC 3986 section 5.2.4.

    Unlike :func:`posixpath.normpath` a trailing slash is preserved.

    >>> remove_dot_segments("/a/b/../c/./d/")
    '/a/c/d/'
    """
    output: list[str] = []
    for segment in path.split("/"):
        if segment == "..":
            if len(output) > 1:
                output.pop()
        elif segment != ".":
            output.append(segment)
    if path.endswith(("/.", "/..")):
        output.append("")
    return "/".join(output)


def _validate_template(template: object) -> str:
    if not isinstance(template, str):
        msg = f"Article path {template!r} is not a string."
        raise _malformed(msg)
    if "\\" in template:
        msg = f"Article path '{template}' contains a backslash."
        raise _malformed(msg)
    if template.count(TITLE_PLACEHOLDER) != 1:
        msg = f"Article path '{template}' must contain '{TITLE_PLACEHOLDER}' exactly once."
        raise _malformed(msg)
    if not template.endswith(TITLE_PLACEHOLDER):
        msg = f"Article path '{template}' does not have '{TITLE_PLACEHOLDER}' at the end."
        raise _malformed(msg)
    return template


def resolve_article_path(template: object, server: str) -> ArticlePathShape:
    """Derive the base URI and relative link prefix from ``server + template``.

    Parameters
    ----------
    template : object
        Article path setting; must be a string ending in a single ``$1`` and
        free of backslashes.
    server : str
        Server origin, e.g. ``https://example.org`` or ``//example.org``.

    Returns
    -------
    ArticlePathShape
        The absolute base URI (always ending in ``/``) and the relative link
        prefix (``./`` for directory-style paths).

    Raises
    ------
    ConfigurationError
        With kind ``malformed-path`` when the template is invalid or the
        combined URL has no host.
    """
    checked = _validate_template(template)
    url = f"{server}{checked[: -len(TITLE_PLACEHOLDER)]}"
    try:
        bits = urlsplit(url)
    except ValueError as exc:
        msg = f"Failed to parse article path '{url}'."
        raise _malformed(msg) from exc
    if not bits.netloc:
        msg = f"Article path '{url}' does not name a host."
        raise _malformed(msg)

    path = remove_dot_segments(bits.path) if bits.path else "/"
    if not path.startswith("/"):
        path = f"/{path}"
    cut = path.rfind("/") + 1
    base = SplitResult(bits.scheme, bits.netloc, path[:cut], "", "")
    relative = SplitResult("", "", f".{path[cut - 1 :]}", bits.query, bits.fragment)
    return ArticlePathShape(
        base_uri=urlunsplit(base),
        relative_link_prefix=_assemble(relative, url),
    )


def _assemble(relative: SplitResult, url: str) -> str:
    """Rebuild the relative part, keeping a bare trailing ``?`` from the URL."""
    text = urlunsplit(relative)
    if url.endswith("?") and not text.endswith("?"):
        text = f"{text}?"
    return text


__all__ = ["remove_dot_segments", "resolve_article_path"]
