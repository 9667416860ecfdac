"""Constant values and primitive definitions that can be shared throughout the code."""
from typing import NamedTuple, Any
import math

from typing_extensions import Final

from labelconverter.utilities import errors

INTERVAL_TIER: Final = "IntervalTier"
POINT_TIER: Final = "TextTier"

TEXTGRID_CLASS: Final = "TextGrid"
DEFAULT_FILE_TYPE: Final = "ooTextFile"
DEFAULT_TIER_NAME: Final = "phonemes"

TIERS_EXIST: Final = "<exists>"
TIERS_ABSENT: Final = "<absent>"

# Lab timestamps are in 100ns ticks; TextGrid timestamps are in seconds
TICKS_PER_SECOND: Final = 10000000

EMPTY_LAB_TEXT: Final = "-"
PHONE_DICT_SEPARATOR: Final = "="


# Printed labels of the Praat long text format, keyed by field name
TEXTGRID_LABELS: Final = {
    "fileType": "File type",
    "objectClass": "Object class",
    "minTimestamp": "xmin",
    "maxTimestamp": "xmax",
    "tiersExist": "tiers",
    "size": "size",
}

TIER_LABELS: Final = {
    "tierType": "class",
    "name": "name",
    "minTimestamp": "xmin",
    "maxTimestamp": "xmax",
    "size": "size",
}

ENTRY_LIST_LABELS: Final = {
    INTERVAL_TIER: "intervals",
    POINT_TIER: "points",
}

INTERVAL_LABELS: Final = {
    "start": "xmin",
    "end": "xmax",
    "label": "text",
}

POINT_LABELS: Final = {
    "time": "number",
    "label": "mark",
}


class Token(NamedTuple):
    """A timed unit of text; the time unit is decided by whoever built it"""

    text: str
    start: float
    end: float


class LabLine(NamedTuple):
    start: float
    end: float
    text: str


class Interval(NamedTuple):
    start: float
    end: float
    label: str

    @classmethod
    def build(cls, *args: Any):
        """
        Safe constructor for Interval.

        Interval(start, end, label) doesn't check the type at runtime.
        Interval.build() performs type conversion and accepts either
        3 arguments (start, end, label) or 1 argument (another Interval
        or a tuple or list of 3 elements).

        Labels are kept verbatim so that a parsed textgrid can be written
        back out unchanged.

        Raises:
            ArgumentError: Either wrong number of arguments, or failed to convert
                the arguments to float or string.
        """
        try:
            start, end, label = args[0] if len(args) == 1 else args
            return cls(float(start), float(end), str(label))
        except (TypeError, ValueError):
            raise errors.ArgumentError(f"Cannot build Interval from {args}")

    def __eq__(self, other: Any):
        return (
            isinstance(other, Interval)
            and math.isclose(self.start, other.start)
            and math.isclose(self.end, other.end)
            and self.label == other.label
        )

    def __ne__(self, other: Any):
        return not self == other

    def __repr__(self):
        return str(tuple(self))


class Point(NamedTuple):
    time: float
    label: str

    @classmethod
    def build(cls, *args: Any):
        """
        Safe constructor for Point.

        It accepts either 2 arguments (time, label),
        or 1 argument (another Point or a tuple or list of 2 elements).

        Raises:
            ArgumentError: Either wrong number of arguments, or failed to convert
                the arguments to float or string.
        """
        try:
            time, label = args[0] if len(args) == 1 else args
            return cls(float(time), str(label))
        except (TypeError, ValueError):
            raise errors.ArgumentError(f"Cannot build Point from {args}")

    def __eq__(self, other: Any):
        return (
            isinstance(other, Point)
            and math.isclose(self.time, other.time, abs_tol=1e-14)
            and self.label == other.label
        )

    def __ne__(self, other: Any):
        return not self == other

    def __repr__(self):
        return str(tuple(self))


class ErrorReportingMode:
    SILENCE: Final = "silence"
    WARNING: Final = "warning"
    ERROR: Final = "error"

    validOptions = [SILENCE, WARNING, ERROR]
