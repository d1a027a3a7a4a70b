from typing import List, Optional

from .models import MatchType, TraceStep

TRACE_LIMIT = 20


class StepTracer:
    """
    Keeps a short, human-readable record of the first windows the matcher
    processes, for explaining the algorithm. Recording never affects scoring.
    """

    def __init__(self, limit: int = TRACE_LIMIT):
        self.limit = limit
        self.processed = 0
        self.steps: List[TraceStep] = []

    def record(
        self,
        window_text: str,
        hash_value: int,
        match_type: Optional[MatchType] = None,
        source_match: Optional[str] = None,
    ) -> None:
        """
        Count one processed window and keep it if the limit is not reached.

        :param match_type: Type of the match the window produced, None if unmatched
        :param source_match: Source window text the suspect window was matched to
        """
        if self.processed < self.limit:
            matched = match_type is not None
            if matched:
                description = f"Hash {hash_value} matched! Verified: {match_type.value} match"
            else:
                description = f"Hash {hash_value} - No match found"
            self.steps.append(TraceStep(
                step=self.processed + 1,
                description=description,
                window_text=window_text,
                hash_value=hash_value,
                matched=matched,
                source_match=source_match or None,
            ))
        self.processed += 1
