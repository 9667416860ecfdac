"""
Various generic utility functions
"""

import codecs
import io
from typing import NoReturn, Type, Union

from typing_extensions import Literal

from labelconverter.utilities import errors
from labelconverter.utilities import constants


def reportNoop(_exception: Type[BaseException], _text: str) -> None:
    pass


def reportException(exception: Type[BaseException], text: str) -> NoReturn:
    raise exception(text)


def reportWarning(_exception: Type[BaseException], text: str) -> None:
    print(text)


def getErrorReporter(reportingMode: Literal["silence", "warning", "error"]):
    modeToFunc = {
        constants.ErrorReportingMode.SILENCE: reportNoop,
        constants.ErrorReportingMode.WARNING: reportWarning,
        constants.ErrorReportingMode.ERROR: reportException,
    }

    return modeToFunc[reportingMode]


def validateOption(variableName, value, optionClass):
    if value not in optionClass.validOptions:
        raise errors.WrongOption(variableName, value, optionClass.validOptions)


def escapeQuotes(text: str) -> str:
    return text.replace('"', '""')


def unescapeQuotes(text: str) -> str:
    return text.replace('""', '"')


def decodeData(data: Union[bytes, str]) -> str:
    """
    Returns the text held by /data/

    Praat writes UTF-16 files; those are recognized by their byte order mark.
    Everything else is read as UTF-8 after dropping the null bytes that
    some writers place between characters.

    Raises:
        FormatError: the bytes are not valid utf-8 or utf-16
    """
    if isinstance(data, bytes):
        try:
            if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
                data = data.decode("utf-16")
            else:
                data = data.replace(b"\x00", b"").decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise errors.FormatError(f"Data is not valid utf-8 or utf-16 text: {e}")

    return data.replace("\x00", "")


def readFile(fnFullPath: str) -> bytes:
    with io.open(fnFullPath, "rb") as fd:
        return fd.read()


def writeFile(fnFullPath: str, text: str) -> None:
    with io.open(fnFullPath, "w", encoding="utf-8", newline="\n") as fd:
        fd.write(text)
