"""Validated, ordered move sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

MIN_MOVES = 3


class InvalidMoveSetError(ValueError):
    """Move names cannot form a fair non-transitive game."""


@dataclass(frozen=True)
class MoveSet:
    """Ordered, duplicate-free move names with 1-based indices.

    Index ``i`` always names ``names[i - 1]``; the tuple is never mutated.
    """

    names: tuple[str, ...]

    def __post_init__(self):
        """Reject move sets that cannot be judged cyclically."""
        names = tuple(self.names)
        object.__setattr__(self, "names", names)

        if len(names) < MIN_MOVES:
            raise InvalidMoveSetError(
                f"At least {MIN_MOVES} moves are required, got {len(names)}"
            )
        if len(names) % 2 == 0:
            raise InvalidMoveSetError(
                f"An odd number of moves is required, got {len(names)}"
            )

        seen: set[str] = set()
        duplicates: list[str] = []
        for name in names:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise InvalidMoveSetError(
                f"Moves must not repeat: {', '.join(duplicates)}"
            )

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "MoveSet":
        """Build from command line arguments."""
        return cls(names=tuple(args))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def name_of(self, index: int) -> str:
        """Move name at 1-based index."""
        if not self.is_valid_index(index):
            raise IndexError(f"Move index {index} out of range 1-{len(self.names)}")
        return self.names[index - 1]

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self.names)

    def indexed(self) -> list[tuple[int, str]]:
        """(index, name) pairs in menu order."""
        return list(enumerate(self.names, start=1))
