"""
Window matching between a source and a suspect document.

Each suspect window is first resolved against the hash index of the source
(exact match, collisions settled by comparing text). Only when that fails is
every source window scanned for a partial, word-membership overlap.
"""

import math
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

from .models import Match, MatchType, PatternEntry, Segment, SegmentType
from .pattern_index import build_pattern_index
from .rolling_hash import WindowHasher
from .step_tracer import StepTracer
from .validation import AnalysisCancelledError

PARTIAL_MATCH_RATIO = 0.6


def partial_match_threshold(window_size: int) -> int:
    """Minimum number of shared words for a partial match."""
    return math.ceil(window_size * PARTIAL_MATCH_RATIO)


def find_exact_match(
    candidates: List[PatternEntry], window_text: str
) -> Optional[PatternEntry]:
    """
    Return the first bucket entry whose text equals the window, if any.

    Entries are scanned in insertion order; colliding entries with different
    text are skipped.
    """
    for candidate in candidates:
        if candidate.text == window_text:
            return candidate
    return None


def find_partial_match(
    suspect_window: List[str],
    source_windows: List[FrozenSet[str]],
    window_size: int,
) -> Optional[Tuple[int, List[bool]]]:
    """
    Find the lowest source window sharing enough, but not all, words.

    Overlap counts suspect words (with repeats) that appear anywhere in the
    source window; position is ignored.

    :param suspect_window: Tokens of the suspect window
    :param source_windows: Word set of each source window, by start index
    :param window_size: Effective window size
    :return: (source_index, per-word membership flags) or None
    """
    threshold = partial_match_threshold(window_size)
    for j, source_words in enumerate(source_windows):
        members = [word in source_words for word in suspect_window]
        count = sum(members)
        if threshold <= count < window_size:
            return j, members
    return None


def match_windows(
    source_tokens: List[str],
    suspect_tokens: List[str],
    window_size: int,
    rolling: bool = True,
    tracer: Optional[StepTracer] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> Tuple[List[Match], List[bool]]:
    """
    Slide over the suspect document and resolve every window.

    :param window_size: Effective window size, at least 2
    :param rolling: Use the rolling hash update for both documents
    :param tracer: Optional tracer receiving every processed window
    :param should_cancel: Polled before each suspect window; returning True
        raises AnalysisCancelledError
    :return: (matches in production order, matched flag per suspect token)
    """
    index: Dict[int, List[PatternEntry]] = build_pattern_index(
        source_tokens, window_size, rolling=rolling
    )
    source_windows = [
        frozenset(source_tokens[j:j + window_size])
        for j in range(len(source_tokens) - window_size + 1)
    ]

    matches: List[Match] = []
    matched = [False] * len(suspect_tokens)

    for i, window_text, window_hash in WindowHasher(suspect_tokens, window_size, rolling=rolling):
        if should_cancel is not None and should_cancel():
            raise AnalysisCancelledError(i)

        match_type = None
        source_text = None

        entry = find_exact_match(index.get(window_hash, []), window_text)
        if entry is not None:
            match_type = MatchType.EXACT
            source_text = entry.text
            for k in range(i, i + window_size):
                matched[k] = True
            matches.append(Match(
                start_index=i,
                end_index=i + window_size - 1,
                matched_text=window_text,
                source_index=entry.index,
                match_type=MatchType.EXACT,
                hash_value=window_hash,
            ))
        else:
            suspect_window = suspect_tokens[i:i + window_size]
            partial = find_partial_match(suspect_window, source_windows, window_size)
            if partial is not None:
                j, members = partial
                match_type = MatchType.PARTIAL
                source_text = " ".join(source_tokens[j:j + window_size])
                for offset, is_member in enumerate(members):
                    if is_member:
                        matched[i + offset] = True
                matches.append(Match(
                    start_index=i,
                    end_index=i + window_size - 1,
                    matched_text=window_text,
                    source_index=j,
                    match_type=MatchType.PARTIAL,
                    hash_value=window_hash,
                ))

        if tracer is not None:
            tracer.record(window_text, window_hash, match_type, source_text)

    return matches, matched


def single_word_match(
    source_tokens: List[str], suspect_tokens: List[str]
) -> Tuple[List[Segment], int]:
    """
    Word-by-word membership check used when the texts are too short for
    windows. Only exact and original labels are produced.

    :return: (one segment per suspect token, number of matched tokens)
    """
    source_set = {word.lower() for word in source_tokens}
    segments = []
    matched_count = 0
    for word in suspect_tokens:
        if word.lower() in source_set:
            segments.append(Segment(text=word, segment_type=SegmentType.EXACT))
            matched_count += 1
        else:
            segments.append(Segment(text=word, segment_type=SegmentType.ORIGINAL))
    return segments, matched_count
