from bo_extractor.config.settings import Settings
from bo_extractor.extraction.exceptions import ExtractionFailure
from bo_extractor.extraction.vocabulary import (
    DEFAULT_VOCABULARY,
    ExtractionVocabulary,
    vocabulary_from_settings,
)
from bo_extractor.logging.logger import Log
from bo_extractor.processor.models import ExtractedReport, RawInput
from bo_extractor.processor.pipeline import ExtractionContext, PipelineStep
from bo_extractor.processor.steps import default_steps


class Processor:
    """Runs the extraction passes over one file and freezes the result.

    Pipeline: sanitize -> locate query -> mine aliases -> mine metadata -> classify.
    """

    def __init__(
        self,
        steps: list[PipelineStep] | None = None,
        vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
        max_file_size_bytes: int | None = None,
    ) -> None:
        self._steps = steps if steps is not None else default_steps()
        self._vocabulary = vocabulary
        self._max_file_size_bytes = max_file_size_bytes

    def process(self, raw: RawInput) -> ExtractedReport:
        """Extract one report.

        Raises:
            ExtractionFailure: if the file is too large or any pass fails.
        """
        if (
            self._max_file_size_bytes is not None
            and len(raw.content) > self._max_file_size_bytes
        ):
            raise ExtractionFailure(
                raw.file_name,
                f"File is {len(raw.content)} bytes, limit is {self._max_file_size_bytes}",
            )

        context = ExtractionContext(
            file_name=raw.file_name,
            raw_bytes=raw.content,
            vocabulary=self._vocabulary,
        )
        for step in self._steps:
            try:
                context = step.run(context)
            except ExtractionFailure:
                raise
            except Exception as exc:
                raise ExtractionFailure(
                    raw.file_name,
                    f"{type(step).__name__} failed: {exc}",
                ) from exc

        Log.info(
            f"Extracted {raw.file_name}: {context.complexity.value} "
            f"(score {context.score:g}, {context.days:g} days)"
        )
        return self._to_report(context)

    @staticmethod
    def _to_report(context: ExtractionContext) -> ExtractedReport:
        return ExtractedReport(
            file_name=context.file_name,
            sql=context.sql,
            field_aliases=tuple(context.field_aliases),
            parameters=tuple(context.parameters),
            formulas=tuple(context.formulas),
            tables=tuple(context.tables),
            has_vba=context.has_vba,
            complexity=context.complexity,
            days=context.days,
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured vocabulary and size limit."""
    return Processor(
        vocabulary=vocabulary_from_settings(settings),
        max_file_size_bytes=settings.max_file_size_bytes,
    )
