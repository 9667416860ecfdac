import math
from typing import List, Sequence, Union

from labelconverter.utilities import errors
from labelconverter.utilities import utils
from labelconverter.utilities.constants import EMPTY_LAB_TEXT, LabLine


def _parseTimestamp(rawValue: str, fieldName: str, line: str) -> float:
    try:
        value = float(rawValue)
    except ValueError:
        raise errors.ParseError(fieldName, rawValue, line)

    # nan and inf parse as floats but cannot be written back as ticks
    if not math.isfinite(value):
        raise errors.ParseError(fieldName, rawValue, line)

    return value


def parseLabStr(data: Union[bytes, str]) -> List[LabLine]:
    """
    Converts the contents of a lab file into a list of LabLines

    Each non-blank line holds a start tick, an end tick and optionally
    a label.  The label is everything after the second run of whitespace.
    """
    data = utils.decodeData(data).replace("\r\n", "\n")

    lines = []
    for rawLine in data.split("\n"):
        rawLine = rawLine.strip()
        if rawLine == "":
            continue

        fields = rawLine.split(None, 2)
        if len(fields) < 2:
            raise errors.ParseError("end", None, rawLine)

        start = _parseTimestamp(fields[0], "start", rawLine)
        end = _parseTimestamp(fields[1], "end", rawLine)
        text = fields[2] if len(fields) > 2 else ""

        lines.append(LabLine(start, end, text))

    return lines


def getLabAsStr(lines: Sequence[LabLine]) -> str:
    """Converts LabLines into the text of a lab file; timestamps are truncated to ints"""
    outputTxt = ""
    for start, end, text in lines:
        if text == "":
            text = EMPTY_LAB_TEXT
        outputTxt += "%d %d %s\n" % (int(start), int(end), text)

    return outputTxt.strip()
