"""
Glob-style pattern matching used by every registry lookup.

``?`` matches exactly one character, ``*`` matches any run of characters
(possibly empty); everything else matches literally and case-sensitively.
Patterns are anchored at both ends of the text.
"""

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar('T')

WILDCARD_ONE = '?'
WILDCARD_ANY = '*'


def matches(text: str, pattern: str) -> bool:
    """Check whether ``text`` satisfies ``pattern`` in full.

    Single pass over ``text`` with one remembered ``*`` checkpoint. On a
    mismatch the last ``*`` swallows one more character and matching resumes
    right after it, so the scan stays linear-amortized instead of retrying
    every split.
    """
    text_idx = ptrn_idx = 0
    text_len, ptrn_len = len(text), len(pattern)
    resume_idx = -1     # pattern index just after the last '*'
    backtrack_idx = -1  # text index the last '*' has consumed up to

    while text_idx < text_len:
        if ptrn_idx < ptrn_len and pattern[ptrn_idx] in (WILDCARD_ONE, text[text_idx]) \
                and pattern[ptrn_idx] != WILDCARD_ANY:
            text_idx += 1
            ptrn_idx += 1
        elif ptrn_idx < ptrn_len and pattern[ptrn_idx] == WILDCARD_ANY:
            ptrn_idx += 1
            resume_idx = ptrn_idx
            backtrack_idx = text_idx
        elif resume_idx == -1:
            return False
        else:
            backtrack_idx += 1
            ptrn_idx = resume_idx
            text_idx = backtrack_idx

    # Leftover pattern may only be stars.
    return all(ch == WILDCARD_ANY for ch in pattern[ptrn_idx:])


def filter_matching(items: Iterable[T], pattern: str, key: Callable[[T], str]) -> Iterator[T]:
    """Yield the items whose ``key(item)`` satisfies ``pattern``."""
    for item in items:
        if matches(key(item), pattern):
            yield item
