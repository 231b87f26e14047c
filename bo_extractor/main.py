import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from bo_extractor.batch.batch_runner import BatchRunner
from bo_extractor.config.settings import Settings
from bo_extractor.logging.logger import Log
from bo_extractor.processor.exceptions import NoEligibleFilesError
from bo_extractor.processor.processor import build_processor
from bo_extractor.processor.report_serializer import ReportSerializer
from bo_extractor.processor.totals import summarize


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bo-extract",
        description="Extract query, fields and effort estimates from .rep/.wid report files.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="report files or directories")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> run batch over paths -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    Log.debug(f"Starting bo-extract in {settings.app_env} environment")

    runner = BatchRunner(build_processor(settings), settings)
    try:
        result = runner.run_paths(args.paths)
    except NoEligibleFilesError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    serializer = ReportSerializer()
    payload = {
        "reports": [serializer.serialize(r) for r in result.reports],
        "errors": [serializer.serialize_error(e) for e in result.errors],
        "rejected": result.rejected,
        "totals": asdict(summarize(result.reports)),
    }
    print(json.dumps(payload, indent=2))
    return 0 if result.has_successes else 1


if __name__ == "__main__":
    sys.exit(main())
