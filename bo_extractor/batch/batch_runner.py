from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TypeVar

from bo_extractor.config.settings import Settings
from bo_extractor.extraction.exceptions import ExtractionFailure
from bo_extractor.logging.logger import Log
from bo_extractor.processor.exceptions import FileReadError, NoEligibleFilesError
from bo_extractor.processor.file_loader import FileLoader
from bo_extractor.processor.models import (
    BatchResult,
    ExtractedReport,
    ExtractionError,
    RawInput,
)
from bo_extractor.processor.processor import Processor

_Item = TypeVar("_Item")


class BatchRunner:
    """Extract a batch of files concurrently; one file's failure never affects another."""

    def __init__(
        self,
        processor: Processor,
        settings: Settings,
        file_loader: FileLoader | None = None,
    ) -> None:
        self._processor = processor
        self._settings = settings
        self._file_loader = file_loader if file_loader is not None else FileLoader()

    def run(self, files: list[RawInput]) -> BatchResult:
        """Extract every eligible in-memory file and wait for all of them.

        Raises:
            NoEligibleFilesError: if no file has a supported extension.
        """
        return self._run_batch(files, lambda f: f.file_name, self._extract_one)

    def run_paths(self, paths: list[Path]) -> BatchResult:
        """Extract every eligible file on disk and wait for all of them.

        Files are read inside their own extraction, after the extension
        filter, so a missing or unreadable file only fails itself.

        Raises:
            NoEligibleFilesError: if no file has a supported extension.
        """
        return self._run_batch(
            self._file_loader.expand(paths),
            lambda p: p.name,
            self._load_and_extract,
        )

    def is_eligible(self, file_name: str) -> bool:
        return file_name.lower().endswith(tuple(self._settings.allowed_extensions))

    def _run_batch(
        self,
        items: Sequence[_Item],
        name_of: Callable[[_Item], str],
        extract: Callable[[_Item], ExtractedReport | ExtractionError],
    ) -> BatchResult:
        eligible = [i for i in items if self.is_eligible(name_of(i))]
        rejected = [name_of(i) for i in items if not self.is_eligible(name_of(i))]
        for name in rejected:
            Log.warning(f"Skipping {name}: unsupported file type")
        if not eligible:
            raise NoEligibleFilesError(self._rejection_message())

        Log.info(f"Extracting {len(eligible)} report files")
        workers = min(self._settings.max_workers, len(eligible))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(extract, eligible))

        result = BatchResult(rejected=rejected)
        for outcome in outcomes:
            if isinstance(outcome, ExtractionError):
                result.errors.append(outcome)
            else:
                result.reports.append(outcome)
        Log.info(f"Batch finished: {len(result.reports)} ok, {len(result.errors)} failed")
        return result

    def _load_and_extract(self, path: Path) -> ExtractedReport | ExtractionError:
        try:
            raw = self._file_loader.load(
                path,
                max_size_bytes=self._settings.max_file_size_bytes,
            )
        except (FileNotFoundError, FileReadError) as exc:
            Log.error(f"Cannot load {path.name}: {exc}")
            return ExtractionError(file_name=path.name, error=str(exc))
        return self._extract_one(raw)

    def _extract_one(self, raw: RawInput) -> ExtractedReport | ExtractionError:
        try:
            return self._processor.process(raw)
        except ExtractionFailure as exc:
            Log.error(f"Extraction failed for {exc.file_name}: {exc.cause}")
            return ExtractionError(file_name=exc.file_name, error=exc.cause)
        except Exception as exc:
            Log.error(f"Extraction failed for {raw.file_name}: {exc}")
            return ExtractionError(file_name=raw.file_name, error=str(exc))

    def _rejection_message(self) -> str:
        extensions = " or ".join(self._settings.allowed_extensions)
        return f"Please upload {extensions} files"
