"""
String manipulators: string forms of the sequence algorithms, word wrapping,
trimming and case helpers.

The algorithm wrappers treat a string as a sequence of characters, run the
generic algorithm, and join the resulting characters back into strings.
"""
from __future__ import annotations
from typing import Any, Iterable, List, Optional

from seqsafe.algorithms import sequence as seq
from seqsafe.strings.types import DEFAULT_DELIMS, WrapConfig


def chars_to_string(chars: Iterable[str]) -> str:
    """Join a sequence of characters into one string."""
    return "".join(chars)


def _strings(segments: List[List[str]]) -> List[str]:
    return [chars_to_string(segment) for segment in segments]


def filter_out_seq(text: str, pattern: str) -> str:
    """Remove every non-overlapping occurrence of ``pattern``.

    See ``seqsafe.algorithms.filter_out_seq``.
    """
    return chars_to_string(seq.filter_out_seq(text, pattern))


def filter_out_occ(text: str, characters: str) -> str:
    """Remove every character that appears in ``characters``."""
    return chars_to_string(seq.filter_out_occ(text, characters))


def filter_out_occ_seq(text: str, patterns: Iterable[str]) -> str:
    """Remove occurrences of each pattern in turn."""
    return chars_to_string(seq.filter_out_occ_seq(text, list(patterns)))


def filter_out(text: str, character: str) -> str:
    """Remove every occurrence of one character."""
    return chars_to_string(seq.filter_out(text, character))


def repeat(text: str, n: Any) -> str:
    """Repeat ``text`` ``n`` times; fractional counts append a leading part.

    >>> repeat("abcd", 2.5)
    'abcdabcdab'
    """
    return chars_to_string(seq.repeat(text, n))


def split_seq(text: str, pattern: str) -> List[str]:
    """Split on every non-overlapping occurrence of ``pattern``."""
    return _strings(seq.split_seq(text, pattern))


def split_occ(text: str, characters: str) -> List[str]:
    """Split at every character that appears in ``characters``."""
    return _strings(seq.split_occ(text, characters))


def split_occ_seq(text: str, patterns: Iterable[str]) -> List[str]:
    """Split at the earliest occurrence of any pattern (first listed wins ties)."""
    return _strings(seq.split_occ_seq(text, list(patterns)))


def split(text: str, character: str) -> List[str]:
    """Split on every occurrence of one character."""
    return _strings(seq.split(text, character))


def _find_last_of(text: str, delims: str) -> Optional[int]:
    for i in range(len(text) - 1, -1, -1):
        if text[i] in delims:
            return i
    return None


def _find_first_of(text: str, delims: str, start: int = 0) -> Optional[int]:
    for i in range(start, len(text)):
        if text[i] in delims:
            return i
    return None


def word_wrap(text: str, width: int, force: bool = False, delims: str = DEFAULT_DELIMS) -> List[str]:
    """Word-wrap ``text`` into lines of about ``width`` characters.

    A line is broken at the last delimiter within the first ``width + 1``
    characters, and that delimiter is dropped. If the window has no delimiter
    the word is longer than a line: with ``force`` it is cut into
    ``width``-character pieces, otherwise the line runs on to the next
    delimiter (or the end of the text). Lines can therefore be longer than
    ``width`` unless ``force`` is set.

    Args:
        text: Text to wrap
        width: Target line width
        force: Cut over-long words
        delims: Characters lines may be broken at

    Returns:
        List of lines, without the delimiters the breaks consumed
    """
    lines: List[str] = []
    window = width + 1

    while len(text) > window:
        pos = _find_last_of(text[:window], delims)
        if pos is None:
            if force:
                # Cut without consuming anything; at least one character per line
                cut = max(width, 1)
                lines.append(text[:cut])
                text = text[cut:]
                continue

            pos = _find_first_of(text, delims, window)
            if pos is None:
                lines.append(text)
                text = ""
                break

        lines.append(text[:pos])
        text = text[pos + 1:]

    if text:
        lines.append(text)
    return lines


def wrap_with(text: str, config: WrapConfig) -> List[str]:
    """``word_wrap`` driven by a ``WrapConfig``."""
    return word_wrap(text, config.width, force=config.force, delims=config.delims)


def trim_left(text: str, delims: str = DEFAULT_DELIMS) -> str:
    """Strip leading delimiters. A string made only of delimiters is returned as is."""
    start = next((i for i, c in enumerate(text) if c not in delims), None)
    if start is None:
        return text
    return text[start:]


def trim_right(text: str, delims: str = DEFAULT_DELIMS) -> str:
    """Strip trailing delimiters. A string made only of delimiters is returned as is."""
    end = next((i for i in range(len(text) - 1, -1, -1) if text[i] not in delims), None)
    if end is None:
        return text
    return text[:end + 1]


def trim(text: str, delims: str = DEFAULT_DELIMS) -> str:
    """Strip delimiters from both ends."""
    return trim_left(trim_right(text, delims), delims)


def to_upper(text: str) -> str:
    return text.upper()


def to_lower(text: str) -> str:
    return text.lower()


def is_equal_ins(a: str, b: str) -> bool:
    """Case-insensitive equality."""
    return to_lower(a) == to_lower(b)
