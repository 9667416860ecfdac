"""
Functions for reading/writing textgrid files.

A Textgrid is a container for an ordered list of annotation tiers.  Tiers
can contain either interval data (IntervalTier) or point data (TextTier).
Only interval tiers can be read from a file; both kinds can be written.

openTextgrid() can be used to open a textgrid file.
Textgrid.save() can be used to save a Textgrid object to a file.

The classes themselves live in data_classes/:
IntervalTier in data_classes/interval_tier.py
TextTier in data_classes/text_tier.py
Textgrid in data_classes/textgrid.py
"""
from typing import Union

from labelconverter.data_classes.interval_tier import IntervalTier
from labelconverter.data_classes.text_tier import TextTier
from labelconverter.data_classes.textgrid import Textgrid, _tgToDictionary, _dictionaryToTg
from labelconverter.utilities import textgrid_io
from labelconverter.utilities import utils

__all__ = [
    "IntervalTier",
    "TextTier",
    "Textgrid",
    "parseTextgrid",
    "serializeTextgrid",
    "openTextgrid",
]


def parseTextgrid(data: Union[bytes, str]) -> Textgrid:
    """
    Builds a Textgrid from the contents of a textgrid file

    Raises:
        FormatError: not a textgrid, truncated data, or a tier class
            other than IntervalTier
        ParseError: a value could not be decoded
    """
    return _dictionaryToTg(textgrid_io.parseTextgridStr(data))


def serializeTextgrid(tg: Textgrid) -> str:
    """
    Renders a Textgrid in the long Praat text format

    Raises:
        SizeMismatch: a declared size disagrees with the tiers or entries
    """
    return textgrid_io.getTextgridAsStr(_tgToDictionary(tg))


def openTextgrid(fnFullPath: str) -> Textgrid:
    """
    Opens a textgrid file (utf-8 or utf-16, long or short text format)

    https://www.fon.hum.uva.nl/praat/manual/TextGrid_file_formats.html
    """
    return parseTextgrid(utils.readFile(fnFullPath))
