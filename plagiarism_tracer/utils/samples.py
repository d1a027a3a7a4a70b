from typing import MutableMapping

SAMPLE_SOURCE_TEXT = (
    "The quick brown fox jumps over the lazy dog. This is a classic pangram used in "
    "typography and testing. It contains every letter of the English alphabet at least once."
)
SAMPLE_SUSPECT_TEXT = (
    "The quick brown fox jumps over the lazy dog. This sentence is often used in font "
    "testing. It contains every letter of the English alphabet."
)


def load_sample_texts(state: MutableMapping) -> None:
    """Fill the two text inputs with the demo pair and drop any previous result."""
    state["source_text"] = SAMPLE_SOURCE_TEXT
    state["suspect_text"] = SAMPLE_SUSPECT_TEXT
    state["analysis_result"] = None
