"""
Locale-style collation for sortable names.

Approximates an English collator configured with base sensitivity, ignored
punctuation and numeric ordering:

- "Ólafsdóttir" and "Olafsdottir" compare equal (accents ignored)
- "smith" and "Smith" compare equal (case ignored)
- "O'Mahony" and "OMahony" compare equal (punctuation and spaces ignored)
- "A2" sorts before "A10" (digit runs compare by value, before letters)

```python
from sortable_names.collation import compare, collation_key

sorted(names, key=collation_key)
```

Both functions are pure and safe to share across threads.
"""

from __future__ import annotations
import re
import unicodedata
from functools import lru_cache
from typing import Tuple

from unidecode import unidecode

_DIGIT_RUN_PATTERN = re.compile(r"([0-9]+)")
_IGNORABLE_PATTERN = re.compile(r"[^0-9a-z]+")

# Digit runs sort ahead of letters, as in the Unicode collation algorithm
_NUMERIC_RANK = 0
_ALPHA_RANK = 1

CollationKey = Tuple[Tuple[int, int, str], ...]


def fold(text: str) -> str:
    """Reduce text to lowercase ASCII letters and digits."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    # unidecode covers letters NFKD leaves intact (ð, ø, ł, æ, ß)
    return _IGNORABLE_PATTERN.sub("", unidecode(stripped).casefold())


@lru_cache(maxsize=4096)
def collation_key(text: str) -> CollationKey:
    """
    Build a sort key for `text`, usable as ``sorted(..., key=collation_key)``.

    The folded text is split into alternating letter and digit runs. Digit runs
    become ``(0, length, digits)`` with leading zeros dropped, so runs of any size
    compare by value without integer conversion. Letter runs become
    ``(1, 0, letters)``.
    """
    key = []
    for index, chunk in enumerate(_DIGIT_RUN_PATTERN.split(fold(text))):
        if not chunk:
            continue
        if index % 2:
            digits = chunk.lstrip("0")
            key.append((_NUMERIC_RANK, len(digits), digits))
        else:
            key.append((_ALPHA_RANK, 0, chunk))
    return tuple(key)


def compare(x: str, y: str) -> int:
    """
    Comparator for sortable names.

    Args:
        x: First string
        y: Second string

    Returns:
        Negative if x sorts first, positive if y sorts first, zero if equivalent
    """
    key_x = collation_key(x)
    key_y = collation_key(y)
    return (key_x > key_y) - (key_x < key_y)
