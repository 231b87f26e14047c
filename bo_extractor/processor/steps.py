from bo_extractor.extraction.classifier import classify
from bo_extractor.extraction.field_alias_miner import mine_field_aliases
from bo_extractor.extraction.metadata_miners import (
    has_macro_code,
    mine_formulas,
    mine_parameters,
    mine_tables,
)
from bo_extractor.extraction.query_locator import coarse_corpus, locate_excerpt
from bo_extractor.extraction.sanitizer import sanitize
from bo_extractor.logging.logger import Log
from bo_extractor.processor.pipeline import ExtractionContext, PipelineStep


class SanitizeStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.text = sanitize(context.raw_bytes)
        Log.debug(
            f"Sanitized {len(context.raw_bytes)} bytes of {context.file_name} "
            f"into {len(context.text)} chars"
        )
        return context


class LocateQueryStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.query_corpus = coarse_corpus(context.text)
        context.sql = locate_excerpt(context.text)
        if not context.sql:
            Log.debug(f"No query found in {context.file_name}")
        return context


class MineFieldAliasesStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.field_aliases = mine_field_aliases(
            context.text,
            context.query_corpus,
            context.vocabulary,
        )
        Log.debug(f"{context.file_name}: {len(context.field_aliases)} field aliases")
        return context


class MineMetadataStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.parameters = mine_parameters(context.text)
        context.formulas = mine_formulas(context.text, context.vocabulary)
        context.tables = mine_tables(context.query_corpus, context.vocabulary)
        context.has_vba = has_macro_code(context.text)
        Log.debug(
            f"{context.file_name}: {len(context.parameters)} parameters, "
            f"{len(context.formulas)} formulas, {len(context.tables)} tables, "
            f"macro code={context.has_vba}"
        )
        return context


class ClassifyStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        result = classify(
            field_count=len(context.field_aliases),
            parameter_count=len(context.parameters),
            formula_count=len(context.formulas),
            table_count=len(context.tables),
            has_vba=context.has_vba,
        )
        context.score = result.score
        context.complexity = result.complexity
        context.days = result.days
        return context


def default_steps() -> list[PipelineStep]:
    """The five extraction passes in execution order."""
    return [
        SanitizeStep(),
        LocateQueryStep(),
        MineFieldAliasesStep(),
        MineMetadataStep(),
        ClassifyStep(),
    ]
