"""
Core matching engine for windowed hash-based similarity analysis.

This package contains the algorithm and its supporting pieces:
- Text normalization and tokenization
- Polynomial and rolling hashes over word windows
- Source pattern indexing
- Exact and partial window matching
- Segment annotation, scoring and step tracing
"""

from .detector import PlagiarismDetector, analyze, DEFAULT_WINDOW_SIZE
from .models import (
    AnalysisResult, Match, MatchType, PatternEntry, Segment, SegmentType,
    SimilarityLevel, TraceStep
)
from .normalizer import normalize_text, extract_words, word_count
from .rolling_hash import BASE, PRIME, calculate_hash, compute_h, recalculate_hash, WindowHasher
from .pattern_index import build_pattern_index
from .window_matcher import (
    PARTIAL_MATCH_RATIO, find_exact_match, find_partial_match, match_windows,
    partial_match_threshold, single_word_match
)
from .segment_annotator import annotate_segments
from .scoring import compute_percentage, similarity_level
from .step_tracer import StepTracer, TRACE_LIMIT
from .logging_config import setup_logging, get_logger, LoggerMixin, ProductionLogger
from .validation import (
    ValidationError, ParameterValidationError, FileValidationError,
    InputSizeError, AnalysisCancelledError,
    FileValidator, ParameterValidator,
    validate_inputs, handle_exceptions
)

__all__ = [
    'PlagiarismDetector',
    'analyze',
    'DEFAULT_WINDOW_SIZE',
    'AnalysisResult',
    'Match',
    'MatchType',
    'PatternEntry',
    'Segment',
    'SegmentType',
    'SimilarityLevel',
    'TraceStep',
    'normalize_text',
    'extract_words',
    'word_count',
    'BASE',
    'PRIME',
    'calculate_hash',
    'compute_h',
    'recalculate_hash',
    'WindowHasher',
    'build_pattern_index',
    'PARTIAL_MATCH_RATIO',
    'find_exact_match',
    'find_partial_match',
    'match_windows',
    'partial_match_threshold',
    'single_word_match',
    'annotate_segments',
    'compute_percentage',
    'similarity_level',
    'StepTracer',
    'TRACE_LIMIT',
    'setup_logging',
    'get_logger',
    'LoggerMixin',
    'ProductionLogger',
    'ValidationError',
    'ParameterValidationError',
    'FileValidationError',
    'InputSizeError',
    'AnalysisCancelledError',
    'FileValidator',
    'ParameterValidator',
    'validate_inputs',
    'handle_exceptions'
]
