"""
Result types produced by the matching engine.

Every object here is created fresh for one analysis and handed to the caller
(UI, CLI or report helpers) for rendering.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class MatchType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"


class SegmentType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    ORIGINAL = "original"


class SimilarityLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class PatternEntry:
    """A source window stored under its hash value."""

    text: str
    index: int


@dataclass(frozen=True)
class Match:
    """
    A suspect window resolved against the source document.

    ``start_index``/``end_index`` are inclusive suspect token positions,
    ``source_index`` is the start of the source window it was matched to.
    """

    start_index: int
    end_index: int
    matched_text: str
    source_index: int
    match_type: MatchType
    hash_value: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "matchedText": self.matched_text,
            "sourceIndex": self.source_index,
            "type": self.match_type.value,
            "hashValue": self.hash_value,
        }


@dataclass(frozen=True)
class Segment:
    text: str
    segment_type: SegmentType
    source_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"text": self.text, "type": self.segment_type.value}
        if self.source_index is not None:
            data["sourceIndex"] = self.source_index
        return data


@dataclass(frozen=True)
class TraceStep:
    step: int
    description: str
    window_text: str
    hash_value: int
    matched: bool
    source_match: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "step": self.step,
            "description": self.description,
            "windowText": self.window_text,
            "hashValue": self.hash_value,
            "matched": self.matched,
        }
        if self.source_match is not None:
            data["sourceMatch"] = self.source_match
        return data


@dataclass
class AnalysisResult:
    """
    Everything one call to ``analyze`` produces.

    ``segments`` always holds exactly one entry per suspect token, in document
    order. ``trace`` is capped and never influences the score.
    """

    percentage: int
    total_words: int
    matched_words: int
    matches: List[Match] = field(default_factory=list)
    trace: List[TraceStep] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    window_size: int = 0
    effective_window_size: int = 0
    single_word_mode: bool = False

    @property
    def level(self) -> SimilarityLevel:
        from .scoring import similarity_level
        return similarity_level(self.percentage)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation using the camelCase keys the UI consumes."""
        return {
            "plagiarismPercentage": self.percentage,
            "level": self.level.value,
            "totalWords": self.total_words,
            "matchedWords": self.matched_words,
            "windowSize": self.window_size,
            "effectiveWindowSize": self.effective_window_size,
            "singleWordMode": self.single_word_mode,
            "matches": [m.to_dict() for m in self.matches],
            "algorithmSteps": [s.to_dict() for s in self.trace],
            "processedText": [s.to_dict() for s in self.segments],
        }
