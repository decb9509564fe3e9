from __future__ import annotations

import itertools
import logging
from typing import Iterable, List, Sequence, Tuple, TypeVar

from .ir import Chord, KeySymbol

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChordAssigner:
    """Assign a fixed-length key chord to every target of every key group."""

    def __init__(self, *, max_chord_length: int = 0) -> None:
        self._max_chord_length = max_chord_length

    def assign(
        self, groups: Iterable[Tuple[Sequence[KeySymbol], Sequence[T]]]
    ) -> List[Tuple[T, Chord]]:
        """Pair targets with chords, group by group, in the order supplied.

        Targets that do not fit in ``len(keys) ** chord_length`` chords, and
        every target of a group with no keys, receive no chord.
        """

        pairs: List[Tuple[T, Chord]] = []
        for keys, targets in groups:
            pairs.extend(self._assign_group(keys, targets))
        return pairs

    def _assign_group(
        self, keys: Sequence[KeySymbol], targets: Sequence[T]
    ) -> List[Tuple[T, Chord]]:
        if not keys:
            if targets:
                logger.debug("no keys for group; dropping %d target(s)", len(targets))
            return []

        length = chord_length(len(targets), len(keys), self._max_chord_length)
        chords = itertools.islice(itertools.product(keys, repeat=length), len(targets))
        pairs = list(zip(targets, chords))

        dropped = len(targets) - len(pairs)
        if dropped:
            logger.debug(
                "chord length %d over %d key(s) leaves %d target(s) without a chord",
                length,
                len(keys),
                dropped,
            )
        return pairs


def chord_length(target_count: int, key_count: int, max_chord_length: int = 0) -> int:
    """Chord length for a group: ``ceil(targets / keys)``, capped when the cap is positive."""

    temp_len = -(-target_count // key_count)
    if max_chord_length <= 0:
        return temp_len
    return min(temp_len, max_chord_length)
