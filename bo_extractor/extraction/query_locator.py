"""Locates the embedded query in sanitized report text.

Two scans with different purposes:

* ``coarse_corpus`` gathers every ``SELECT ... FROM|WHERE`` span. The alias and
  table miners read it; it is never shown to the user.
* ``locate_excerpt`` finds the single best query start and rebuilds a bounded,
  readable excerpt for display and audit.
"""

import re
from typing import Final

CORPUS_SPAN_LIMIT: Final = 10_000
EXCERPT_WINDOW: Final = 8000
EXCERPT_MAX_TOKENS: Final = 250
EXCERPT_MIN_TOKENS: Final = 25
EXCERPT_MAX_CHARS: Final = 1500

_CORPUS_RE = re.compile(
    r"SELECT[\s\S]{0,%d}?(?:FROM|WHERE)" % CORPUS_SPAN_LIMIT,
    re.IGNORECASE,
)
_LABELLED_SELECT_RE = re.compile(r'select\s+[\w.]+\s+"[^"]+"', re.IGNORECASE | re.ASCII)
_LOOSE_SELECT_RE = re.compile(
    r"select\s+(distinct\s+)?[\w.()]+[\s\S]{10,500}?from\s+\w+",
    re.IGNORECASE | re.ASCII,
)
_TRAILING_CLAUSE_RE = re.compile(r"order|group|having|;", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E]")


def coarse_corpus(text: str) -> str:
    """Join every non-overlapping ``SELECT ... FROM|WHERE`` span with newlines."""
    return "\n".join(match.group(0) for match in _CORPUS_RE.finditer(text))


def find_query_start(text: str) -> int | None:
    """Position of the best query start, or None when the text has no query."""
    match = _LABELLED_SELECT_RE.search(text) or _LOOSE_SELECT_RE.search(text)
    return match.start() if match else None


def locate_excerpt(text: str) -> str:
    """Rebuild a readable query excerpt; empty string when no query is found."""
    start = find_query_start(text)
    if start is None:
        return ""
    tokens = text[start : start + EXCERPT_WINDOW].split()
    excerpt = " ".join(_take_balanced(tokens))
    excerpt = _WHITESPACE_RE.sub(" ", excerpt)
    excerpt = _NON_PRINTABLE_RE.sub("", excerpt)
    return excerpt[:EXCERPT_MAX_CHARS]


def _take_balanced(tokens: list[str]) -> list[str]:
    """Keep tokens until a trailing clause keyword appears outside any subquery.

    The stopping keyword is kept.
    """
    kept: list[str] = []
    depth = 0
    seen_from = False
    for token in tokens[:EXCERPT_MAX_TOKENS]:
        if token.lower() == "from":
            seen_from = True
        kept.append(token)
        depth += token.count("(") - token.count(")")
        if (
            seen_from
            and depth <= 0
            and len(kept) > EXCERPT_MIN_TOKENS
            and _TRAILING_CLAUSE_RE.fullmatch(token)
        ):
            break
    return kept
