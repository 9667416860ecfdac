"""
Functions for reading/writing lab files.

A lab file holds one timed label per line:

    <start ticks> <end ticks> <label>

where a tick is 100 nanoseconds.  An empty label is written as '-'.

openLab() can be used to open a lab file.
Lab.save() can be used to save a Lab object to a file.
"""
from typing import Union

from labelconverter.data_classes.lab import Lab
from labelconverter.utilities import lab_io
from labelconverter.utilities import utils


def parseLab(data: Union[bytes, str]) -> Lab:
    """
    Builds a Lab from the contents of a lab file

    Raises:
        ParseError: a line has fewer than two fields or a non-numeric time
    """
    return Lab(lab_io.parseLabStr(data))


def serializeLab(lab: Lab) -> str:
    return lab_io.getLabAsStr(lab.lines)


def openLab(fnFullPath: str) -> Lab:
    """Opens a lab file"""
    return parseLab(utils.readFile(fnFullPath))
