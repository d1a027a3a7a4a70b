import io
import json
import logging

from plagiarism_tracer.core.detector import PlagiarismDetector
from plagiarism_tracer.core.logging_config import (
    LoggerMixin, StructuredFormatter, get_logger, setup_logging
)


def test_structured_formatter_includes_analysis_fields():
    record = logging.LogRecord("plagiarism_tracer", logging.INFO, __file__, 10, "done", None, None)
    record.operation = "analyze"
    record.window_size = 5
    record.suspect_words = 12
    entry = json.loads(StructuredFormatter().format(record))
    assert entry["message"] == "done"
    assert entry["level"] == "INFO"
    assert entry["operation"] == "analyze"
    assert entry["window_size"] == 5
    assert entry["suspect_words"] == 12
    assert "duration" not in entry


def test_setup_logging_console_stream():
    stream = io.StringIO()
    setup_logging(log_level="DEBUG", stream=stream)
    get_logger("plagiarism_tracer.test").info("hello")
    entry = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert entry["message"] == "hello"


def test_setup_logging_plain_format():
    stream = io.StringIO()
    setup_logging(log_level="INFO", structured_logging=False, stream=stream)
    logging.getLogger("plain").warning("careful")
    assert "WARNING" in stream.getvalue()
    assert "careful" in stream.getvalue()


def test_setup_logging_writes_files(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(log_level="INFO", log_dir=str(log_dir), enable_console=False, enable_file=True)
    logger = logging.getLogger("plagiarism_tracer.files")
    logger.info("to app log")
    logger.warning("to error log")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "to app log" in (log_dir / "app.log").read_text(encoding="utf-8")
    errors = (log_dir / "errors.log").read_text(encoding="utf-8")
    assert "to error log" in errors
    assert "to app log" not in errors


def test_log_operation_records_timing(caplog):
    class Worker(LoggerMixin):
        pass

    with caplog.at_level(logging.INFO):
        with Worker().log_operation("index", window_size=3):
            pass
    record = caplog.records[-1]
    assert record.getMessage() == "Completed operation: index"
    assert record.operation == "index"
    assert record.window_size == 3
    assert record.duration >= 0


def test_detector_logs_completed_analysis(caplog):
    with caplog.at_level(logging.INFO):
        PlagiarismDetector().analyze("the cat sat on the mat", "the cat sat on the mat")
    record = [r for r in caplog.records if r.getMessage() == "Completed operation: analyze"][-1]
    assert record.percentage == 100
    assert record.effective_window_size == 5
    assert record.suspect_words == 6
