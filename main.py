import argparse
import sys

from plagiarism_tracer import config
from plagiarism_tracer.core.detector import PlagiarismDetector
from plagiarism_tracer.core.logging_config import setup_logging
from plagiarism_tracer.core.normalizer import word_count
from plagiarism_tracer.core.validation import (
    FileValidator, ParameterValidator, ValidationError, FileValidationError
)
from plagiarism_tracer.utils.report import format_summary, result_to_json, trace_frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "plagiarism-tracer",
        description="Compare a suspect text against a source text with Rabin-Karp window matching."
    )
    parser.add_argument("source", help="Path to the source document (or the text itself with --text)")
    parser.add_argument("suspect", help="Path to the suspect document (or the text itself with --text)")
    parser.add_argument("-w", "--window-size", type=int, default=config.DEFAULT_WINDOW_SIZE,
                        help="Words per window (default: %(default)s)")
    parser.add_argument("--text", action="store_true", help="Treat SOURCE and SUSPECT as literal text")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--show-trace", action="store_true", help="Print the algorithm trace table")
    parser.add_argument("--no-rolling", action="store_true",
                        help="Rehash every window from scratch instead of rolling the hash")
    parser.add_argument("--max-words", type=int, default=config.MAX_INPUT_WORDS,
                        help="Reject documents longer than this many words, 0 disables (default: %(default)s)")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def read_document(path: str) -> str:
    """Read a UTF-8 text document after validating its path."""
    validated = FileValidator.validate_text_file(path, max_size_mb=config.MAX_FILE_SIZE_MB)
    try:
        return validated.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileValidationError(f"Cannot read {path}: {e}", field="file_path", value=path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        log_dir=config.LOG_DIR,
        structured_logging=config.STRUCTURED_LOGGING,
        enable_file=config.LOG_TO_FILE,
    )

    try:
        if args.text:
            source_text, suspect_text = args.source, args.suspect
        else:
            source_text = read_document(args.source)
            suspect_text = read_document(args.suspect)
    except FileValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    try:
        ParameterValidator.validate_word_limit(word_count(source_text), "source", args.max_words)
        ParameterValidator.validate_word_limit(word_count(suspect_text), "suspect", args.max_words)
        detector = PlagiarismDetector(window_size=args.window_size, rolling=not args.no_rolling)
        result = detector.analyze(source_text, suspect_text)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    if args.json:
        print(result_to_json(result))
        return 0

    print(format_summary(result))
    if args.show_trace:
        frame = trace_frame(result)
        if frame.empty:
            print("\nNo algorithm steps recorded.")
        else:
            print("\nAlgorithm steps:")
            print(frame.drop(columns=["Description"]).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
