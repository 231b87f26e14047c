from pathlib import Path

from bo_extractor.processor.exceptions import FileReadError
from bo_extractor.processor.models import RawInput


class FileLoader:
    """Reads report files from disk into RawInput records."""

    def load(self, path: Path, max_size_bytes: int | None = None) -> RawInput:
        """Read file bytes from disk.

        The size limit is checked before any bytes are read.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file is over the size limit or cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            size = path.stat().st_size
            if max_size_bytes is not None and size > max_size_bytes:
                raise FileReadError(f"File is {size} bytes, limit is {max_size_bytes}")
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return RawInput(file_name=path.name, content=content)

    @staticmethod
    def expand(paths: list[Path]) -> list[Path]:
        """Replace each directory with its direct file children, sorted."""
        expanded: list[Path] = []
        for path in paths:
            if path.is_dir():
                expanded.extend(sorted(p for p in path.iterdir() if p.is_file()))
            else:
                expanded.append(path)
        return expanded
