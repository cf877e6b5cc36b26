"""Pure derivations from site settings and upstream service answers."""

from .article_path import remove_dot_segments, resolve_article_path
from .interwiki import build_interwiki_map, canonical_protocol
from .matchers import (
    ParameterizedAliasMatcher,
    case_bucketed_pattern,
    compile_case_bucketed,
    quote_title,
    quoted_aliases,
    single_bucket_pattern,
    start_to_end_pattern,
)
from .variants import LanguageVariantResolver
from .widths import resolve_width

__all__ = [
    "LanguageVariantResolver",
    "ParameterizedAliasMatcher",
    "build_interwiki_map",
    "canonical_protocol",
    "case_bucketed_pattern",
    "compile_case_bucketed",
    "quote_title",
    "quoted_aliases",
    "remove_dot_segments",
    "resolve_article_path",
    "resolve_width",
    "single_bucket_pattern",
    "start_to_end_pattern",
]
