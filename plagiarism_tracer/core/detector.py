from typing import Callable, Optional

from .logging_config import LoggerMixin
from .models import AnalysisResult, Segment, SegmentType
from .normalizer import extract_words
from .scoring import compute_percentage
from .segment_annotator import annotate_segments
from .step_tracer import TRACE_LIMIT, StepTracer
from .validation import ParameterValidator, validate_inputs
from .window_matcher import match_windows, single_word_match

DEFAULT_WINDOW_SIZE = 5


class PlagiarismDetector(LoggerMixin):
    """
    Rabin-Karp style similarity analysis of a suspect text against a source.

    The detector holds only defaults; every call to ``analyze`` builds and
    discards its own index, so one instance can be reused freely.
    """

    @validate_inputs(
        window_size=ParameterValidator.validate_window_size,
        trace_limit=lambda x: ParameterValidator.validate_positive_integer(x, "trace_limit", min_value=0)
    )
    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE, rolling: bool = True,
                 trace_limit: int = TRACE_LIMIT):
        """
        Args:
            window_size: Default number of words per window
            rolling: Slide window hashes with the rolling update rather than
                rehashing every window (identical values either way)
            trace_limit: Number of windows recorded in the algorithm trace
        """
        self.window_size = window_size
        self.rolling = rolling
        self.trace_limit = trace_limit

    @validate_inputs(
        source_text=lambda x: ParameterValidator.validate_text(x, "source_text"),
        suspect_text=lambda x: ParameterValidator.validate_text(x, "suspect_text"),
        window_size=lambda x: None if x is None else ParameterValidator.validate_window_size(x)
    )
    def analyze(self, source_text: str, suspect_text: str,
                window_size: Optional[int] = None,
                should_cancel: Optional[Callable[[], bool]] = None) -> AnalysisResult:
        """
        Compare ``suspect_text`` against ``source_text``.

        Args:
            source_text: The original document
            suspect_text: The document checked for copied content
            window_size: Words per window, defaults to the detector's setting
            should_cancel: Polled between suspect windows; a True result raises
                AnalysisCancelledError

        Returns:
            AnalysisResult with score, matches, per-word segments and trace
        """
        if window_size is None:
            window_size = self.window_size

        source_words = extract_words(source_text)
        suspect_words = extract_words(suspect_text)

        with self.log_operation("analyze",
                                window_size=window_size,
                                source_words=len(source_words),
                                suspect_words=len(suspect_words)) as op:
            if not source_words or not suspect_words:
                self.logger.debug("Empty document after normalization, nothing to match")
                return AnalysisResult(
                    percentage=0,
                    total_words=len(suspect_words),
                    matched_words=0,
                    segments=[Segment(text=w, segment_type=SegmentType.ORIGINAL) for w in suspect_words],
                    window_size=window_size,
                )

            effective = min(window_size, len(source_words), len(suspect_words))
            op.extra['effective_window_size'] = effective

            if effective < 2:
                self.logger.debug(f"Effective window size {effective}, using single-word matching")
                segments, matched_count = single_word_match(source_words, suspect_words)
                result = AnalysisResult(
                    percentage=compute_percentage(matched_count, len(suspect_words)),
                    total_words=len(suspect_words),
                    matched_words=matched_count,
                    segments=segments,
                    window_size=window_size,
                    effective_window_size=effective,
                    single_word_mode=True,
                )
                op.extra['percentage'] = result.percentage
                return result

            tracer = StepTracer(limit=self.trace_limit)
            matches, matched = match_windows(
                source_words,
                suspect_words,
                effective,
                rolling=self.rolling,
                tracer=tracer,
                should_cancel=should_cancel,
            )
            matched_words = sum(matched)

            result = AnalysisResult(
                percentage=compute_percentage(matched_words, len(suspect_words)),
                total_words=len(suspect_words),
                matched_words=matched_words,
                matches=matches,
                trace=tracer.steps,
                segments=annotate_segments(suspect_words, matches),
                window_size=window_size,
                effective_window_size=effective,
            )
            op.extra['percentage'] = result.percentage
            self.logger.debug(
                f"{len(matches)} matching windows out of {tracer.processed}, "
                f"{matched_words}/{len(suspect_words)} words matched"
            )
            return result


def analyze(source_text: str, suspect_text: str,
            window_size: int = DEFAULT_WINDOW_SIZE) -> AnalysisResult:
    """
    Score how much of ``suspect_text`` appears in ``source_text``.

    Never rejects a string: empty or punctuation-only texts and texts shorter
    than the window all yield a well-formed result.
    """
    return PlagiarismDetector(window_size=window_size).analyze(source_text, suspect_text)
