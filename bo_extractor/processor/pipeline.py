from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bo_extractor.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary
from bo_extractor.processor.models import Complexity, FieldAlias


@dataclass(slots=True)
class ExtractionContext:
    file_name: str
    raw_bytes: bytes = b""
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
    text: str = ""
    query_corpus: str = ""
    sql: str = ""
    field_aliases: list[FieldAlias] = field(default_factory=list)
    parameters: list[str] = field(default_factory=list)
    formulas: list[str] = field(default_factory=list)
    tables: list[str] = field(default_factory=list)
    has_vba: bool = False
    score: float = 0.0
    complexity: Complexity = Complexity.SIMPLE
    days: float = 0.5


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
