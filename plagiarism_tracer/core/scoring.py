import math

from .models import SimilarityLevel

HIGH_SIMILARITY_THRESHOLD = 70
MEDIUM_SIMILARITY_THRESHOLD = 30


def compute_percentage(matched_words: int, total_words: int) -> int:
    """
    Share of suspect words marked as matched, as an integer percentage.

    Halves round up (12.5 -> 13) rather than to the nearest even integer.
    """
    if total_words <= 0:
        return 0
    percentage = math.floor(matched_words / total_words * 100 + 0.5)
    return max(0, min(100, percentage))


def similarity_level(percentage: int) -> SimilarityLevel:
    """Bucket a similarity percentage into the High/Medium/Low badge."""
    if percentage >= HIGH_SIMILARITY_THRESHOLD:
        return SimilarityLevel.HIGH
    elif percentage >= MEDIUM_SIMILARITY_THRESHOLD:
        return SimilarityLevel.MEDIUM
    else:
        return SimilarityLevel.LOW
