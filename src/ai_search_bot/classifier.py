"""Heuristic detection of search operators ("Google dorks") in free-text queries.

Both catalogs below are plain data: extending the recognized operators means
adding an entry, not touching :func:`classify`.

Known precision issue: indicators are plain substrings, so a hyphen or
parenthesis in ordinary prose, or "or"/"and" inside any word ("for",
"Android"), classifies a query as an operator query.
"""

import logging
import re

from ai_search_bot.data import Classification, QueryKind

logger = logging.getLogger(__name__)

OPERATOR_INDICATORS: tuple[str, ...] = (
    "site:",
    "filetype:",
    "ext:",
    "inurl:",
    "intitle:",
    "intext:",
    "cache:",
    "link:",
    "related:",
    "info:",
    "define:",
    "stocks:",
    "weather:",
    "map:",
    "movie:",
    "in:",
    "allinurl:",
    "allintitle:",
    "allintext:",
    "allinanchor:",
    "daterange:",
    "numrange:",
    "author:",
    "group:",
    "insubject:",
    "msgid:",
    "inanchor:",
    "loc:",
    "location:",
    "-",
    "+",
    "*",
    "..",
    "(",
    ")",
    "or",
    "and",
)

CONTEXT_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"site:\S+", re.IGNORECASE), "searching within specific website"),
    (re.compile(r"filetype:\S+", re.IGNORECASE), "filtering by file type"),
    (re.compile(r"ext:\S+", re.IGNORECASE), "searching for specific file extensions"),
    (re.compile(r"inurl:\S+", re.IGNORECASE), "finding pages with specific URL patterns"),
    (re.compile(r"intitle:\S+", re.IGNORECASE), "searching in page titles"),
    (re.compile(r"intext:\S+", re.IGNORECASE), "searching within page content"),
    (re.compile(r"cache:\S+", re.IGNORECASE), "accessing cached versions"),
    (re.compile(r"link:\S+", re.IGNORECASE), "finding pages linking to specific URLs"),
    (re.compile(r"related:\S+", re.IGNORECASE), "finding related websites"),
    (re.compile(r"info:\S+", re.IGNORECASE), "getting information about specific URLs"),
    (re.compile(r"define:\S+", re.IGNORECASE), "finding definitions"),
    (re.compile(r"allinurl:\S+", re.IGNORECASE), "all terms must appear in URL"),
    (re.compile(r"allintitle:\S+", re.IGNORECASE), "all terms must appear in title"),
    (re.compile(r"allintext:\S+", re.IGNORECASE), "all terms must appear in content"),
    (re.compile(r"inanchor:\S+", re.IGNORECASE), "searching in anchor text"),
    (re.compile(r'"[^"]+"'), "exact phrase matching"),
)

# Literal, case-sensitive substring checks on the raw query.
CONTEXT_SUFFIXES: tuple[tuple[str, str], ...] = (
    (" OR ", "with OR logic"),
    (" AND ", "with AND logic"),
    ("-", "with exclusions"),
    ("+", "with required terms"),
    ("*", "with wildcards"),
    ("..", "with range search"),
)

GENERIC_CONTEXT = "Advanced Google Dork search"


def is_operator_query(query: str) -> bool:
    """Return True if the query contains any operator indicator."""
    if query.count('"') >= 2:
        return True
    lowered = query.lower()
    return any(indicator in lowered for indicator in OPERATOR_INDICATORS)


def describe_operators(query: str) -> str:
    """Build a human-readable description of the operators used in a query.

    Args:
        query: Raw query text.

    Returns:
        E.g. ``"Google Dork search (filtering by file type) with exclusions"``.
    """
    detected = [description for pattern, description in CONTEXT_PATTERNS if pattern.search(query)]
    if detected:
        context = f"Google Dork search ({', '.join(detected)})"
    else:
        context = GENERIC_CONTEXT

    for marker, suffix in CONTEXT_SUFFIXES:
        if marker in query:
            context += f" {suffix}"
    return context


def classify(query: str) -> Classification:
    """Classify a query as plain or operator-laden.

    Never raises; anything without indicators is ``QueryKind.PLAIN``.
    """
    if not is_operator_query(query):
        return Classification(kind=QueryKind.PLAIN)

    context = describe_operators(query)
    logger.debug("Operator query detected: %s", context)
    return Classification(kind=QueryKind.OPERATOR, context_description=context)
