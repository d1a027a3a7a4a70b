import pytest

from plagiarism_tracer.core.detector import PlagiarismDetector, analyze
from plagiarism_tracer.core.models import MatchType, SegmentType, SimilarityLevel
from plagiarism_tracer.core.rolling_hash import PRIME
from plagiarism_tracer.core.validation import AnalysisCancelledError, ParameterValidationError

PAIRS = [
    ("the cat sat on the mat", "the cat sat on the mat"),
    ("alpha beta gamma delta epsilon", "zeta eta theta iota kappa"),
    ("anything here", ""),
    ("", "some suspect words"),
    ("hello", "hello there"),
    ("A quick brown fox jumps over the lazy dog.", "The quick brown fox leaps over a lazy dog!"),
    ("one two three one two three one two three", "three two one three two one"),
    ("!!!", "???"),
]


@pytest.mark.parametrize("source,suspect", PAIRS)
@pytest.mark.parametrize("window_size", [-3, 0, 1, 2, 3, 5, 8])
def test_result_invariants(source, suspect, window_size):
    result = analyze(source, suspect, window_size)
    assert 0 <= result.percentage <= 100
    assert result.matched_words <= result.total_words
    assert len(result.segments) == result.total_words
    assert len(result.trace) <= 20
    for match in result.matches:
        assert 0 <= match.hash_value < PRIME
        assert match.end_index == match.start_index + result.effective_window_size - 1


def test_identical_texts_are_fully_exact():
    result = analyze("the cat sat on the mat", "the cat sat on the mat", 5)
    assert result.percentage == 100
    assert result.total_words == 6
    assert result.matched_words == 6
    assert [s.segment_type for s in result.segments] == [SegmentType.EXACT] * 6
    assert [s.text for s in result.segments] == ["the", "cat", "sat", "on", "the", "mat"]
    assert [(m.start_index, m.source_index) for m in result.matches] == [(0, 0), (1, 1)]
    # Last word is covered only by the second window
    assert result.segments[5].source_index == 1
    assert result.segments[0].source_index == 0
    assert result.level is SimilarityLevel.HIGH


def test_disjoint_vocabularies():
    result = analyze("alpha beta gamma delta epsilon", "zeta eta theta iota kappa", 5)
    assert result.percentage == 0
    assert result.matches == []
    assert [s.segment_type for s in result.segments] == [SegmentType.ORIGINAL] * 5
    assert len(result.trace) == 1
    assert result.trace[0].matched is False


def test_empty_suspect():
    result = analyze("anything here", "")
    assert result.total_words == 0
    assert result.matched_words == 0
    assert result.percentage == 0
    assert result.segments == []
    assert result.matches == []
    assert result.trace == []
    assert result.effective_window_size == 0


def test_empty_source_labels_everything_original():
    result = analyze("...", "Some words here")
    assert result.total_words == 3
    assert result.percentage == 0
    assert [s.segment_type for s in result.segments] == [SegmentType.ORIGINAL] * 3


def test_short_texts_use_single_word_matching():
    result = analyze("Hello", "hello!", 5)
    assert result.effective_window_size == 1
    assert result.single_word_mode
    assert result.percentage == 100
    assert [s.segment_type for s in result.segments] == [SegmentType.EXACT]
    assert result.matches == []
    assert result.trace == []


def test_single_source_word_against_longer_suspect():
    result = analyze("cat", "the cat sat", 5)
    assert [s.segment_type for s in result.segments] == [
        SegmentType.ORIGINAL, SegmentType.EXACT, SegmentType.ORIGINAL
    ]
    assert result.matched_words == 1
    assert result.percentage == 33
    assert result.trace == []


@pytest.mark.parametrize("window_size", [-1, 0, 1])
def test_small_window_sizes_fall_back(window_size):
    result = analyze("the cat sat", "the dog sat", window_size)
    assert result.matches == []
    assert result.trace == []
    assert {s.segment_type for s in result.segments} <= {SegmentType.EXACT, SegmentType.ORIGINAL}
    assert result.matched_words == 2


def test_partial_match_at_threshold():
    result = analyze("alpha beta gamma delta epsilon", "alpha beta gamma zeta eta", 5)
    assert [m.match_type for m in result.matches] == [MatchType.PARTIAL]
    assert result.matched_words == 3
    assert result.percentage == 60
    # The whole window is labelled partial, only member words are counted
    assert [s.segment_type for s in result.segments] == [SegmentType.PARTIAL] * 5
    assert all(s.source_index == 0 for s in result.segments)


def test_below_partial_threshold_is_no_match():
    result = analyze("alpha beta gamma delta epsilon", "alpha beta zeta eta theta", 5)
    assert result.matches == []
    assert result.percentage == 0


def test_reordered_window_is_neither_exact_nor_partial():
    result = analyze("alpha beta gamma delta epsilon", "beta alpha gamma delta epsilon", 5)
    assert result.matches == []
    assert result.percentage == 0


def test_hash_collision_resolved_by_text():
    result = analyze("b o a b", "a b", 5)
    assert result.effective_window_size == 2
    assert len(result.matches) == 1
    assert result.matches[0].match_type is MatchType.EXACT
    assert result.matches[0].source_index == 2
    assert result.trace[0].source_match == "a b"


def test_overlapping_windows_count_words_once():
    source = "one two three four five six seven"
    result = analyze(source, source, 3)
    assert len(result.matches) == 5
    assert result.matched_words == 7


def test_trace_is_capped(long_text):
    result = analyze(long_text, long_text, 5)
    assert len(result.matches) == 26
    assert len(result.trace) == 20
    assert [s.step for s in result.trace] == list(range(1, 21))
    assert result.percentage == 100


def test_window_size_larger_than_texts_is_clamped():
    result = analyze("the cat sat on the mat", "the cat sat", 10)
    assert result.window_size == 10
    assert result.effective_window_size == 3
    assert result.percentage == 100


def test_rolling_and_recompute_give_identical_results():
    source = "It was the best of times, it was the worst of times, it was the age of wisdom."
    suspect = "It was the worst of days, it was the age of foolishness and of wisdom."
    rolled = PlagiarismDetector(window_size=4, rolling=True).analyze(source, suspect)
    recomputed = PlagiarismDetector(window_size=4, rolling=False).analyze(source, suspect)
    assert rolled.to_dict() == recomputed.to_dict()


def test_detector_default_and_override_window(detector):
    assert detector.window_size == 5
    result = detector.analyze("a b c d e f", "a b c d e f", window_size=3)
    assert result.effective_window_size == 3


def test_window_size_string_is_coerced():
    assert analyze("a b c", "a b c", "2").effective_window_size == 2


def test_invalid_arguments_raise():
    with pytest.raises(ParameterValidationError):
        analyze("a b c", "a b c", "wide")
    with pytest.raises(ParameterValidationError):
        analyze(123, "a b c")
    with pytest.raises(ParameterValidationError):
        PlagiarismDetector(trace_limit=-1)


def test_none_text_is_treated_as_empty(detector):
    result = detector.analyze(None, "a b")
    assert result.total_words == 2
    assert result.percentage == 0


def test_custom_trace_limit(long_text):
    result = PlagiarismDetector(trace_limit=3).analyze(long_text, long_text)
    assert len(result.trace) == 3


def test_cancellation(detector, long_text):
    with pytest.raises(AnalysisCancelledError):
        detector.analyze(long_text, long_text, should_cancel=lambda: True)


def test_to_dict_uses_display_keys():
    data = analyze("the cat sat on the mat", "the cat sat on a mat", 3).to_dict()
    assert set(data) == {
        "plagiarismPercentage", "level", "totalWords", "matchedWords", "windowSize",
        "effectiveWindowSize", "singleWordMode", "matches", "algorithmSteps", "processedText",
    }
    assert data["matches"][0]["type"] == "exact"
    assert data["processedText"][0] == {"text": "the", "type": "exact", "sourceIndex": 0}
    assert "sourceMatch" in data["algorithmSteps"][0]


def test_control_characters_inside_words_are_not_separators():
    assert analyze("alpha beta", "a\x1cb c d").total_words == 3
    result = analyze("p\x85q r s", "pq r s", window_size=2)
    assert result.percentage == 100
    assert all(m.match_type is MatchType.EXACT for m in result.matches)


def test_byte_order_mark_separates_words():
    result = analyze("one two three", "one\ufefftwo three", window_size=2)
    assert result.total_words == 3
    assert result.percentage == 100
