"""The abstract class used by all textgrid tiers."""
import math
from typing import Optional, Sequence, Type, TypeVar, Iterable, Any, Generic, Tuple, List
from abc import ABC, abstractmethod

from labelconverter.utilities import constants


# EntryType: for defining TextgridTier as a generic container class
EntryType = TypeVar("EntryType", constants.Point, constants.Interval)


class TextgridTier(ABC, Generic[EntryType]):
    """A named, ordered track of time-aligned annotations.

    Unlike the textgrid itself, a tier keeps its declared size separately
    from its entries.  Serializing a tier whose size disagrees with its
    entries is an error.
    """

    tierType: str
    entryType: Type[EntryType]

    def __init__(
        self,
        name: str,
        entries: Iterable[Sequence[Any]] = (),
        minT: float = 0,
        maxT: Optional[float] = None,
        size: Optional[int] = None,
    ):
        """
        PointTier entries: [(timeVal1, label1), (timeVal2, label2), ...]
        IntervalTier entries: [(startTime1, endTime1, label1), (startTime2, endTime2, label2), ...]

        Entries are converted to the proper entry type but keep their order.
        If maxT is not given, the end of the last entry is used (or minT
        for a tier without entries).
        """
        self.name = name
        self._entries: List[EntryType] = [self.entryType.build(entry) for entry in entries]
        self.minTimestamp = float(minT)

        if maxT is None:
            maxT = self.lastTimestamp if self._entries else minT
        self.maxTimestamp = float(maxT)

        self.size = len(self._entries) if size is None else size

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, type(self))
            and self.name == other.name
            and math.isclose(self.minTimestamp, other.minTimestamp)
            and math.isclose(self.maxTimestamp, other.maxTimestamp)
            and self.size == other.size
            and self._entries == other._entries
        )

    def __repr__(self):
        return type(self).__name__ + \
            f"{(self.name, self._entries, self.minTimestamp, self.maxTimestamp)}"

    @property
    def entries(self) -> Tuple[EntryType, ...]:
        return tuple(self._entries)

    @property
    @abstractmethod
    def lastTimestamp(self) -> float:  # pragma: no cover
        """The time at which the last entry ends"""
        pass
