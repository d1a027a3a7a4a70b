import re
from typing import List

# Word characters are the ASCII set [A-Za-z0-9_]. Separators are a fixed set:
# ASCII tab/newline/vertical tab/form feed/CR/space plus the Unicode space
# separators, line/paragraph separators and the BOM. Other control characters
# (U+001C-U+001F, U+0085) are not separators and are dropped like punctuation.
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_NON_WORD = re.compile(f"[^A-Za-z0-9_{WHITESPACE_CHARS}]")
_WHITESPACE = re.compile(f"[{WHITESPACE_CHARS}]+")


def normalize_text(text: str) -> str:
    """
    Lowercase, strip punctuation and collapse whitespace.

    :param text: Raw document text
    :return: Normalized string with single spaces between words
    """
    text = _NON_WORD.sub("", text.lower())
    return _WHITESPACE.sub(" ", text).strip(" ")


def extract_words(text: str) -> List[str]:
    """
    Split a document into normalized word tokens, preserving order.
    """
    return [word for word in normalize_text(text).split(" ") if word]


def word_count(text: str) -> int:
    return len(extract_words(text))


def join_window(tokens: List[str], start: int, window_size: int) -> str:
    return " ".join(tokens[start:start + window_size])
