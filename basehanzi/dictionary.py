"""
Dictionary construction for the basehanzi pair codec.

A dictionary is any text containing CJK ideographs. The unique ideographs are
collected in order of first appearance and assigned, one each, to the ordered
pairs of alphabet symbols (``AA``, ``AB`` ... ``//``). The resulting
:class:`PairMap` is immutable; encode and decode sides must build it from the
same text to agree on the substitution.
"""

from __future__ import annotations

import itertools
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

STANDARD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
DEFAULT_PADDING = "="
DEFAULT_MIN_CHARS = 256
CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
)


class InsufficientDictionaryError(ValueError):
    """Raised when a dictionary holds too few distinct ideographs."""

    def __init__(self, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(
            f"insufficient Chinese characters (found: {found}, need: {required}+)"
        )


@dataclass(frozen=True)
class CodecConfig:
    alphabet: str = STANDARD_ALPHABET
    min_chars: int = DEFAULT_MIN_CHARS
    padding: str = DEFAULT_PADDING
    ranges: Tuple[Tuple[int, int], ...] = CJK_RANGES

    def __post_init__(self) -> None:
        if not self.alphabet:
            raise ValueError("Alphabet must not be empty")
        if not self.alphabet.isascii():
            raise ValueError("Alphabet symbols must be single-byte ASCII characters")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("Alphabet symbols must be distinct")
        if len(self.padding) != 1 or not self.padding.isascii():
            raise ValueError("Padding must be a single ASCII character")
        if self.padding in self.alphabet:
            raise ValueError(f"Padding {self.padding!r} collides with the alphabet")
        if self.min_chars < 0:
            raise ValueError("min_chars must be non-negative")
        # Ranges are stored as tuples of ints.
        object.__setattr__(self, "ranges", tuple((int(lo), int(hi)) for lo, hi in self.ranges))
        for lo, hi in self.ranges:
            if lo > hi:
                raise ValueError(f"Invalid code point range {lo:#x}..{hi:#x}")
        clash = [ch for ch in self.alphabet + self.padding if self.is_qualifying(ch)]
        if clash:
            raise ValueError(f"Code point ranges overlap literal symbol {clash[0]!r}")

    @property
    def max_pairs(self) -> int:
        return len(self.alphabet) ** 2

    def is_qualifying(self, char: str) -> bool:
        cp = ord(char)
        return any(lo <= cp <= hi for lo, hi in self.ranges)


DEFAULT_CONFIG = CodecConfig()


class PairMap:
    """Immutable bijection between alphabet pairs and dictionary characters.

    Build it with :meth:`from_characters` (or :func:`build_pair_map`); after
    construction only the two lookups and the statistics are available.
    """

    __slots__ = ("_pair_to_char", "_char_to_pair", "_total_chars", "_config")

    def __init__(
        self,
        pair_to_char: Mapping[str, str],
        total_chars: int,
        config: CodecConfig = DEFAULT_CONFIG,
    ):
        if hasattr(self, "_pair_to_char"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        forward = dict(pair_to_char)
        reverse = {char: pair for pair, char in forward.items()}
        if len(reverse) != len(forward):
            raise ValueError("Pair mapping is not injective")
        object.__setattr__(self, "_pair_to_char", MappingProxyType(forward))
        object.__setattr__(self, "_char_to_pair", MappingProxyType(reverse))
        object.__setattr__(self, "_total_chars", int(total_chars))
        object.__setattr__(self, "_config", config)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_characters(
        cls,
        chars: Sequence[str],
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> "PairMap":
        pairs = ("".join(p) for p in itertools.product(config.alphabet, repeat=2))
        # zip stops at whichever runs out first: all pairs or all characters.
        return cls(dict(zip(pairs, chars)), total_chars=len(chars), config=config)

    def char_for(self, pair: str) -> Optional[str]:
        return self._pair_to_char.get(pair)

    def pair_for(self, char: str) -> Optional[str]:
        return self._char_to_pair.get(char)

    def __len__(self) -> int:
        return len(self._pair_to_char)

    @property
    def config(self) -> CodecConfig:
        return self._config

    @property
    def total_chars(self) -> int:
        """Distinct qualifying characters found in the dictionary text."""
        return self._total_chars

    @property
    def max_pairs(self) -> int:
        return self._config.max_pairs

    @property
    def coverage_percent(self) -> float:
        return len(self) / self.max_pairs * 100

    @property
    def complete(self) -> bool:
        return len(self) == self.max_pairs

    def __repr__(self) -> str:
        return f"PairMap(pairs={len(self)}/{self.max_pairs}, chars={self._total_chars})"


def extract_characters(text: str, ranges: Iterable[Tuple[int, int]] = CJK_RANGES) -> List[str]:
    """Return the unique qualifying characters of ``text`` in first-seen order."""
    codepoints = np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")
    mask = np.zeros(codepoints.shape, dtype=bool)
    for lo, hi in ranges:
        mask |= (codepoints >= lo) & (codepoints <= hi)
    candidates = codepoints[mask]
    if candidates.size == 0:
        return []
    unique, first_index = np.unique(candidates, return_index=True)
    ordered = unique[np.argsort(first_index, kind="stable")]
    return [chr(cp) for cp in ordered.tolist()]


def build_pair_map(text: str, config: Optional[CodecConfig] = None) -> PairMap:
    config = config or DEFAULT_CONFIG
    chars = extract_characters(text, config.ranges)
    if len(chars) < config.min_chars:
        raise InsufficientDictionaryError(len(chars), config.min_chars)
    return PairMap.from_characters(chars, config)


__all__ = [
    "CJK_RANGES",
    "CodecConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_MIN_CHARS",
    "DEFAULT_PADDING",
    "InsufficientDictionaryError",
    "PairMap",
    "STANDARD_ALPHABET",
    "build_pair_map",
    "extract_characters",
]
