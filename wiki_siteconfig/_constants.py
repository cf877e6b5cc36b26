"""Common literal values used across wiki_siteconfig.

Namespace indices, the title placeholder token, and the regex fragments the
matcher compiler splices together live here so derivation modules and tests
share one definition.

Examples
--------
>>> from wiki_siteconfig import _constants
>>> _constants.NS_CATEGORY
14
>>> "/wiki/$1".count(_constants.TITLE_PLACEHOLDER)
1
"""

NS_SPECIAL = -1
NS_MAIN = 0
NS_USER = 2
NS_CATEGORY = 14

TITLE_PLACEHOLDER = "$1"
NEVER_MATCH = "(?!)"
TITLE_SEPARATOR_CLASS = "[ _]"

THUMBSIZE_OPTION = "thumbsize"
RESPONSIVE_REFERENCES_THRESHOLD = 10
