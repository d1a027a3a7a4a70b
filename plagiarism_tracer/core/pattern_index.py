from collections import defaultdict
from typing import Dict, List

from .models import PatternEntry
from .rolling_hash import WindowHasher


def build_pattern_index(
    tokens: List[str], window_size: int, rolling: bool = True
) -> Dict[int, List[PatternEntry]]:
    """
    Index every window of the source document by its hash.

    Windows overlap with step 1 and none is skipped. Within a bucket, entries
    keep the left-to-right order in which the windows were produced, which is
    the order the matcher scans them in.

    :param tokens: Normalized source tokens
    :param window_size: Effective window size
    :param rolling: Use the rolling hash update instead of rehashing each window
    :return: {hash_value: [PatternEntry, ...]}
    """
    index: Dict[int, List[PatternEntry]] = defaultdict(list)
    for start, text, value in WindowHasher(tokens, window_size, rolling=rolling):
        index[value].append(PatternEntry(text=text, index=start))
    return dict(index)
