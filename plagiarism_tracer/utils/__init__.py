"""
Helpers for presenting analysis results.
"""

from .report import (
    matches_frame, trace_frame, segments_frame, summary_frame,
    result_to_json, format_summary, highlight_html
)
from .samples import SAMPLE_SOURCE_TEXT, SAMPLE_SUSPECT_TEXT, load_sample_texts

__all__ = [
    'matches_frame',
    'trace_frame',
    'segments_frame',
    'summary_frame',
    'result_to_json',
    'format_summary',
    'highlight_html',
    'SAMPLE_SOURCE_TEXT',
    'SAMPLE_SUSPECT_TEXT',
    'load_sample_texts'
]
