import argparse
import json
import mimetypes
import sys
from pathlib import Path

from resume_intake.config.settings import Settings
from resume_intake.enhancement.factory import EnhancerFactory
from resume_intake.extraction.exceptions import FileTooLargeError
from resume_intake.extraction.models import ProgressEvent, UploadedFile
from resume_intake.extraction.orchestrator import build_orchestrator, check_file_size
from resume_intake.logging.logger import Log


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resume-intake",
        description="Extract resume text and print the application record as JSON.",
    )
    parser.add_argument("path", type=Path, help="resume file (.pdf, .docx, .doc, .txt)")
    parser.add_argument("--mime-type", default="", help="declared MIME type; guessed if omitted")
    return parser.parse_args(argv)


def _log_progress(event: ProgressEvent) -> None:
    Log.info(f"{event.stage}: {event.percent}% {event.message}".rstrip())


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> extract one file."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if not args.path.is_file():
        Log.error(f"File not found: {args.path}")
        return 1

    try:
        check_file_size(args.path.name, args.path.stat().st_size, settings.max_file_size_bytes)
    except FileTooLargeError as exc:
        Log.error(str(exc))
        return 2

    mime_type = args.mime_type or mimetypes.guess_type(args.path.name)[0] or ""
    upload = UploadedFile.from_path(args.path, mime_type=mime_type)
    enhancer = EnhancerFactory.create(settings)
    try:
        orchestrator = build_orchestrator(
            settings, progress_listener=_log_progress, enhancer=enhancer
        )
        result = orchestrator.extract(upload)
    except FileTooLargeError as exc:
        Log.error(str(exc))
        return 2
    finally:
        enhancer.close()

    json.dump(result.to_record(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
