# timeline/matrix.py
from typing import Dict, Generic, Iterator, Tuple, TypeVar

T = TypeVar("T")

class PairMatrix(Generic[T]):
    """Symmetric matrix over voice pairs; only the upper triangle (i < j) is stored.

    m[i, j] and m[j, i] return the same entry. Self pairs are never stored.
    """
    def __init__(self, size: int, entries: Dict[Tuple[int, int], T]):
        self.size = size
        self._entries = entries

    @staticmethod
    def _key(i: int, j: int) -> Tuple[int, int]:
        return (i, j) if i < j else (j, i)

    def __getitem__(self, pair: Tuple[int, int]) -> T:
        return self._entries[self._key(*pair)]

    def __contains__(self, pair) -> bool:
        return self._key(*pair) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.pairs())

    def pairs(self) -> list[Tuple[int, int]]:
        return sorted(self._entries)

    def items(self) -> list[Tuple[Tuple[int, int], T]]:
        return [(p, self._entries[p]) for p in self.pairs()]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PairMatrix):
            return NotImplemented
        return self.size == other.size and self._entries == other._entries

    def __repr__(self) -> str:
        return f"PairMatrix(size={self.size}, {dict(self.items())})"
