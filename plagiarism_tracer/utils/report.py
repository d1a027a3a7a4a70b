import html
import json
from typing import Optional

import pandas as pd

from ..core.models import AnalysisResult, MatchType, SegmentType

MATCH_COLUMNS = ["Suspect Words", "Type", "Source Index", "Hash", "Matched Text"]
TRACE_COLUMNS = ["Step", "Window", "Hash", "Matched", "Source Match", "Description"]
SEGMENT_COLUMNS = ["Position", "Word", "Type", "Source Index"]

SEGMENT_STYLES = {
    SegmentType.EXACT: "background-color:#fecaca;color:#7f1d1d;",
    SegmentType.PARTIAL: "background-color:#fde68a;color:#78350f;",
    SegmentType.ORIGINAL: "",
}


def matches_frame(result: AnalysisResult) -> pd.DataFrame:
    """One row per matching suspect window, in production order."""
    rows = [
        [
            f"{m.start_index + 1}-{m.end_index + 1}",
            m.match_type.value,
            m.source_index,
            m.hash_value,
            m.matched_text,
        ]
        for m in result.matches
    ]
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)


def trace_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [
        [
            s.step,
            s.window_text,
            s.hash_value,
            s.matched,
            s.source_match or "",
            s.description,
        ]
        for s in result.trace
    ]
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def segments_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [
        [
            position,
            s.text,
            s.segment_type.value,
            s.source_index,
        ]
        for position, s in enumerate(result.segments, start=1)
    ]
    frame = pd.DataFrame(rows, columns=SEGMENT_COLUMNS)
    # Keep missing source positions as <NA> rather than turning the column into floats
    frame["Source Index"] = frame["Source Index"].astype("Int64")
    return frame


def summary_frame(result: AnalysisResult) -> pd.DataFrame:
    """Per-type word counts of the annotated suspect text."""
    counts = {t.value: 0 for t in SegmentType}
    for segment in result.segments:
        counts[segment.segment_type.value] += 1
    total = max(result.total_words, 1)
    return pd.DataFrame(
        [[name, count, round(count / total * 100, 1)] for name, count in counts.items()],
        columns=["Type", "Words", "Share (%)"],
    )


def result_to_json(result: AnalysisResult, indent: Optional[int] = 2) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=indent)


def format_summary(result: AnalysisResult) -> str:
    """Plain-text summary used by the command line."""
    lines = [
        f"Similarity: {result.percentage}% ({result.level.value})",
        f"Matched words: {result.matched_words}/{result.total_words}",
        f"Window size: {result.window_size} (effective: {result.effective_window_size})",
    ]
    if result.single_word_mode:
        lines.append("Texts too short for windows, compared word by word")
    exact = sum(1 for m in result.matches if m.match_type is MatchType.EXACT)
    partial = len(result.matches) - exact
    lines.append(f"Matching windows: {len(result.matches)} ({exact} exact, {partial} partial)")
    return "\n".join(lines)


def highlight_html(result: AnalysisResult) -> str:
    """Suspect text as HTML spans coloured by segment type."""
    parts = []
    for segment in result.segments:
        word = html.escape(segment.text)
        style = SEGMENT_STYLES[segment.segment_type]
        if style:
            title = f"{segment.segment_type.value} match, source word {segment.source_index + 1}" \
                if segment.source_index is not None else f"{segment.segment_type.value} match"
            parts.append(
                f'<span style="{style}padding:1px 3px;border-radius:4px;" title="{title}">{word}</span>'
            )
        else:
            parts.append(word)
    return " ".join(parts)
