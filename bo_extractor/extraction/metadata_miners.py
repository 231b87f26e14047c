"""Independent miners for prompts, calculated fields, tables and macro code."""

import re
from functools import lru_cache

from bo_extractor.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary

_PROMPT_RE = re.compile(r"@prompt\s*\(\s*'([^']+)'", re.IGNORECASE)
_TABLE_RE = re.compile(r"\b(?:FROM|JOIN)\s+([a-z_][a-z0-9_]*)", re.IGNORECASE | re.ASCII)
_VBA_RE = re.compile(r"\b(?:Sub\s+\w+|Function\s+\w+|End\s+Sub)\b", re.ASCII)
_DIGITS_RE = re.compile(r"\d+", re.ASCII)
_LONG_DIGIT_RUN_RE = re.compile(r"\d{6,}", re.ASCII)

MIN_TABLE_NAME = 3
MAX_TABLE_NAME = 40


def mine_parameters(text: str) -> list[str]:
    """Prompt texts from ``@prompt('...')`` calls, unique in first-seen order."""
    return list(dict.fromkeys(m.group(1) for m in _PROMPT_RE.finditer(text)))


def mine_formulas(
    text: str,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Calculated fields such as ``=Sum(<Revenue>)``, rendered ``Sum(<Revenue>)``.

    Repeated formulas are kept.
    """
    if not vocabulary.formula_functions:
        return []
    canonical = {name.lower(): name for name in vocabulary.formula_functions}
    return [
        f"{canonical[m.group(1).lower()]}(<{m.group(2)}>)"
        for m in _formula_pattern(vocabulary.formula_functions).finditer(text)
    ]


def mine_tables(
    corpus: str,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Lower-cased table names after FROM/JOIN in the query corpus, sorted."""
    tables: set[str] = set()
    for match in _TABLE_RE.finditer(corpus):
        name = match.group(1).lower()
        if name in vocabulary.known_tables or (
            "_" in name and not is_likely_garbage(name, vocabulary)
        ):
            tables.add(name)
    return sorted(tables)


def is_likely_garbage(
    name: str,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
) -> bool:
    if not name or len(name) < MIN_TABLE_NAME or len(name) > MAX_TABLE_NAME:
        return True
    if _DIGITS_RE.fullmatch(name) or _LONG_DIGIT_RUN_RE.search(name):
        return True
    return name.lower() in vocabulary.noise_words


def has_macro_code(text: str) -> bool:
    """True when the text embeds ``Sub``/``Function`` procedures."""
    return _VBA_RE.search(text) is not None


@lru_cache(maxsize=8)
def _formula_pattern(functions: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(f) for f in functions)
    return re.compile(rf"=\s*({alternation})\s*\(<([^>]+)>\)", re.IGNORECASE)
