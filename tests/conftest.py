import logging

import pytest

from plagiarism_tracer.core.detector import PlagiarismDetector


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Entry points reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def detector():
    return PlagiarismDetector()


@pytest.fixture
def long_text():
    return " ".join(f"word{i}" for i in range(30))
