from typing import List

from .models import Match, Segment, SegmentType


def annotate_segments(tokens: List[str], matches: List[Match]) -> List[Segment]:
    """
    Label every suspect token with the first match (in production order)
    whose window covers it, or as original content.

    The label follows the covering window, not the per-word membership used
    for scoring: a word inside a partial window is labelled partial even if
    it was not itself counted as matched.
    """
    segments = []
    for idx, word in enumerate(tokens):
        covering = next(
            (m for m in matches if m.start_index <= idx <= m.end_index), None
        )
        if covering is not None:
            segments.append(Segment(
                text=word,
                segment_type=SegmentType(covering.match_type.value),
                source_index=covering.source_index,
            ))
        else:
            segments.append(Segment(text=word, segment_type=SegmentType.ORIGINAL))
    return segments
