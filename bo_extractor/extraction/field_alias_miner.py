"""Mines (source column, display label) pairs from report text."""

import re
from functools import lru_cache

from bo_extractor.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary
from bo_extractor.processor.models import FieldAlias

MIN_PRIMARY_ALIASES = 5

_ALIAS_RE = re.compile(r',\s*([\w.]+)\s+"([^"]{3,50})"', re.ASCII)
_MEANINGLESS_LABEL_RE = re.compile(r"[\d\s\W]+", re.ASCII)


def mine_primary(corpus: str) -> list[FieldAlias]:
    """Find ``, column "Label"`` pairs in the coarse query corpus."""
    aliases: list[FieldAlias] = []
    for match in _ALIAS_RE.finditer(corpus):
        column, label = match.group(1), match.group(2)
        if _MEANINGLESS_LABEL_RE.fullmatch(label):
            continue
        aliases.append(FieldAlias(column=column.strip(), alias=label.strip()))
    return aliases


def mine_prefixed_columns(
    text: str,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
) -> list[FieldAlias]:
    """Find columns that follow the ``<prefix>_<words>`` naming convention.

    The alias is synthesized from the words after the prefix,
    e.g. ``srq_raised_date`` becomes ``raised date``.
    """
    if not vocabulary.field_prefixes:
        return []
    columns: dict[str, None] = {}
    for match in _prefix_pattern(vocabulary.field_prefixes).finditer(text):
        columns.setdefault(match.group(0).lower(), None)
    return [
        FieldAlias(column=column, alias=" ".join(column.split("_")[1:]))
        for column in columns
    ]


def mine_field_aliases(
    text: str,
    corpus: str,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
) -> list[FieldAlias]:
    """Primary aliases, backfilled from the naming convention when sparse.

    The result is unique by column; the first occurrence wins.
    """
    aliases = mine_primary(corpus)
    if len(aliases) < MIN_PRIMARY_ALIASES:
        aliases.extend(mine_prefixed_columns(text, vocabulary))
    return _unique_by_column(aliases)


def _unique_by_column(aliases: list[FieldAlias]) -> list[FieldAlias]:
    seen: set[str] = set()
    unique: list[FieldAlias] = []
    for alias in aliases:
        if alias.column in seen:
            continue
        seen.add(alias.column)
        unique.append(alias)
    return unique


@lru_cache(maxsize=8)
def _prefix_pattern(prefixes: frozenset[str]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(p) for p in sorted(prefixes))
    return re.compile(rf"\b(?:{alternation})_[a-z_]+\b", re.IGNORECASE | re.ASCII)
