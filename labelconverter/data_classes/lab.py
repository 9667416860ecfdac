"""A Lab is the ordered list of timed lines held in a .lab file"""
from typing import Any, Iterable, List, Sequence, Tuple

from labelconverter.utilities import lab_io
from labelconverter.utilities import utils
from labelconverter.utilities.constants import LabLine, Token


class Lab:
    def __init__(self, lines: Iterable[Sequence[Any]] = ()):
        """
        lines: [(startTick1, endTick1, text1), (startTick2, endTick2, text2), ...]

        Ticks are kept as given (fractional ticks survive until the lab is saved).
        """
        self._lines: List[LabLine] = [
            LabLine(float(start), float(end), str(text)) for start, end, text in lines
        ]

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Lab) and self._lines == other._lines

    def __repr__(self):
        return f"Lab({self._lines})"

    @property
    def lines(self) -> Tuple[LabLine, ...]:
        return tuple(self._lines)

    def tokens(self) -> List[Token]:
        """The lines as tokens, still in ticks"""
        return [Token(text, start, end) for start, end, text in self._lines]

    def save(self, fn: str) -> None:
        utils.writeFile(fn, lab_io.getLabAsStr(self._lines))
