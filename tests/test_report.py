import json

from plagiarism_tracer.core.detector import analyze
from plagiarism_tracer.utils.report import (
    MATCH_COLUMNS, SEGMENT_COLUMNS, TRACE_COLUMNS, format_summary, highlight_html,
    matches_frame, result_to_json, segments_frame, summary_frame, trace_frame
)

SOURCE = "the cat sat on the mat"
SUSPECT = "the cat sat on a mat"


def test_matches_frame():
    frame = matches_frame(analyze(SOURCE, SUSPECT, 3))
    assert list(frame.columns) == MATCH_COLUMNS
    assert list(frame["Type"]) == ["exact", "exact", "partial", "partial"]
    assert frame.iloc[0]["Suspect Words"] == "1-3"
    assert list(frame["Source Index"]) == [0, 1, 1, 3]


def test_empty_frames_keep_columns():
    result = analyze("alpha beta", "", 3)
    assert matches_frame(result).empty
    assert list(matches_frame(result).columns) == MATCH_COLUMNS
    assert list(trace_frame(result).columns) == TRACE_COLUMNS
    assert list(segments_frame(result).columns) == SEGMENT_COLUMNS


def test_trace_frame():
    frame = trace_frame(analyze(SOURCE, SUSPECT, 3))
    assert list(frame["Step"]) == [1, 2, 3, 4]
    assert list(frame["Matched"]) == [True, True, True, True]
    assert frame.iloc[0]["Window"] == "the cat sat"


def test_segments_frame_keeps_missing_source_index():
    frame = segments_frame(analyze("cat", "the cat", 5))
    assert list(frame["Position"]) == [1, 2]
    assert str(frame["Source Index"].dtype) == "Int64"
    assert frame["Source Index"].isna().all()


def test_summary_frame_counts_types():
    frame = summary_frame(analyze("alpha beta gamma delta epsilon", "alpha beta gamma zeta eta", 5))
    counts = dict(zip(frame["Type"], frame["Words"]))
    assert counts == {"exact": 0, "partial": 5, "original": 0}


def test_result_to_json_round_trips_through_json():
    data = json.loads(result_to_json(analyze(SOURCE, SOURCE, 5)))
    assert data["plagiarismPercentage"] == 100
    assert data["level"] == "High"
    assert len(data["processedText"]) == 6


def test_format_summary():
    text = format_summary(analyze(SOURCE, SOURCE, 5))
    assert "Similarity: 100% (High)" in text
    assert "Matched words: 6/6" in text
    assert "(2 exact, 0 partial)" in text


def test_format_summary_mentions_word_by_word_mode():
    assert "word by word" in format_summary(analyze("cat", "cat", 5))


def test_highlight_html_wraps_matched_words_only():
    html = highlight_html(analyze("alpha beta", "zeta alpha beta gamma", 5))
    assert html.count("<span") == 2
    assert html.endswith(" gamma")
    assert html.startswith("zeta ")
