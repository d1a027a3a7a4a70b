"""
Polynomial hashing for word windows.

The modulus is deliberately tiny, so distinct windows collide often and every
hash hit has to be confirmed by comparing the window text itself.
"""

from typing import Iterator, List, Optional, Tuple

from .normalizer import join_window

PRIME = 101  # Modulus for hash values
BASE = 256  # Size of the input alphabet


def calculate_hash(text: str, length: Optional[int] = None) -> int:
    """
    Hash the first ``length`` characters of ``text`` with Horner's method.

    :param text: String to hash
    :param length: Number of leading characters to include (default: all)
    :return: Hash value in [0, PRIME)
    """
    if length is None:
        length = len(text)
    value = 0
    for i in range(length):
        value = (value * BASE + ord(text[i])) % PRIME
    return value


def compute_h(pattern_length: int) -> int:
    """Positional weight of the leading character: BASE^(pattern_length-1) mod PRIME."""
    h = 1
    for _ in range(pattern_length - 1):
        h = (h * BASE) % PRIME
    return h


def _roll_out(current: int, char: str, h: int) -> int:
    value = current - ord(char) * h
    value %= PRIME
    # Python's modulo already floors into [0, PRIME); kept for explicitness.
    if value < 0:
        value += PRIME
    return value


def _roll_in(current: int, char: str) -> int:
    return (current * BASE + ord(char)) % PRIME


def recalculate_hash(old_hash: int, old_char: str, new_char: str, h: int) -> int:
    """
    Slide a fixed-length hash one character to the right in O(1).

    :param old_hash: Hash of the current window
    :param old_char: Character leaving the window on the left
    :param new_char: Character entering the window on the right
    :param h: ``compute_h(window_length)``
    """
    return _roll_in(_roll_out(old_hash, old_char, h), new_char)


class WindowHasher:
    """
    Yields ``(start_index, window_text, hash_value)`` for every window of
    ``window_size`` tokens in a document, left to right with step 1.

    With ``rolling=True`` only the first window is hashed from scratch. Each
    later window drops the leading ``"word "`` one character at a time and
    appends ``" word"`` one character at a time, so a slide costs time
    proportional to the two words involved rather than to the window.
    The leading-character weight ``compute_h(length)`` is computed once per
    window length seen and reused for later slides.
    With ``rolling=False`` every window is rehashed from scratch.
    """

    def __init__(self, tokens: List[str], window_size: int, rolling: bool = True):
        self.tokens = tokens
        self.window_size = window_size
        self.rolling = rolling

    @property
    def window_count(self) -> int:
        if self.window_size < 1:
            return 0
        return max(len(self.tokens) - self.window_size + 1, 0)

    def __len__(self) -> int:
        return self.window_count

    def __iter__(self) -> Iterator[Tuple[int, str, int]]:
        if self.window_count == 0:
            return
        # A one-word window shares nothing with its successor
        if not self.rolling or self.window_size == 1:
            for i in range(self.window_count):
                text = join_window(self.tokens, i, self.window_size)
                yield i, text, calculate_hash(text, len(text))
            return

        text = join_window(self.tokens, 0, self.window_size)
        current = calculate_hash(text, len(text))
        length = len(text)
        yield 0, text, current

        weights = {}

        def weight(n):
            if n not in weights:
                weights[n] = compute_h(n)
            return weights[n]

        for i in range(1, self.window_count):
            outgoing = self.tokens[i - 1] + " "
            incoming = " " + self.tokens[i + self.window_size - 1]
            paired = min(len(outgoing), len(incoming))
            # Same-length prefix slides at a fixed window length
            for old_char, new_char in zip(outgoing[:paired], incoming[:paired]):
                current = recalculate_hash(current, old_char, new_char, weight(length))
            for char in outgoing[paired:]:
                current = _roll_out(current, char, weight(length))
                length -= 1
            for char in incoming[paired:]:
                current = _roll_in(current, char)
                length += 1
            yield i, join_window(self.tokens, i, self.window_size), current
