import re
import itertools
from typing import Dict, List, Tuple, Union, Callable, Any

from labelconverter.utilities import errors
from labelconverter.utilities import my_math
from labelconverter.utilities import utils
from labelconverter.utilities import constants
from labelconverter.utilities.constants import (
    Interval,
    Point,
    INTERVAL_TIER,
    POINT_TIER,
    TEXTGRID_CLASS,
    TIERS_EXIST,
    TIERS_ABSENT,
)

TAB = " " * 4

# A quoted string; a quote inside the text is written twice
HEADER_RE = re.compile(r'"((?:[^"]|"")*)"')

# Numbers must follow whitespace so that "item [1]:" and friends are skipped
TOKEN_RE = re.compile(
    r'(?<=\s)-?[0-9.]+(?:[eE][-+]?[0-9]+)?|"(?:[^"]|"")*"|<exists>|<absent>'
)


def _fetchToken(tokens: List[str], index: int, fieldName: str) -> Tuple[str, int]:
    if index >= len(tokens):
        raise errors.FormatError(
            f"Textgrid data ended unexpectedly while reading '{fieldName}'"
        )

    return tokens[index], index + 1


def _parseNumber(token: str, fieldName: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise errors.ParseError(fieldName, token)


def _parseIndex(token: str, fieldName: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise errors.ParseError(fieldName, token)

    if value < 0:
        raise errors.ParseError(fieldName, token)

    return value


def _parseBool(token: str, fieldName: str) -> bool:
    if token == TIERS_EXIST:
        return True
    elif token == TIERS_ABSENT:
        return False

    raise errors.ParseError(fieldName, token)


def _parseString(token: str, fieldName: str) -> str:
    if len(token) < 2 or token[0] != '"' or token[-1] != '"':
        raise errors.ParseError(fieldName, token)

    return utils.unescapeQuotes(token[1:-1])


def parseTextgridStr(data: Union[bytes, str]) -> Dict:
    """
    Converts the contents of a textgrid file into a dictionary

    Both the long and the short text layouts are understood; the values
    are read in the same order in either one.  Only interval tiers can
    be read.

    Raises:
        FormatError: the data is not a textgrid, is truncated, or
            contains a tier that is not an interval tier
        ParseError: a value could not be decoded

    https://www.fon.hum.uva.nl/praat/manual/TextGrid_file_formats.html
    """
    data = utils.decodeData(data)

    headers = list(itertools.islice(HEADER_RE.finditer(data), 2))
    if len(headers) < 2:
        raise errors.FormatError("Textgrid header is missing the file type or object class")

    if utils.unescapeQuotes(headers[1].group(1)) != TEXTGRID_CLASS:
        raise errors.FormatError("not a TextGrid file")

    fileType = utils.unescapeQuotes(headers[0].group(1))
    tokens = TOKEN_RE.findall(data[headers[1].end():])

    token, i = _fetchToken(tokens, 0, "xmin")
    tgMin = _parseNumber(token, "xmin")
    token, i = _fetchToken(tokens, i, "xmax")
    tgMax = _parseNumber(token, "xmax")
    token, i = _fetchToken(tokens, i, "tiers")
    tiersExist = _parseBool(token, "tiers")
    token, i = _fetchToken(tokens, i, "size")
    size = _parseIndex(token, "size")

    tiers = []
    for _ in range(size):
        tierClass, i = _fetchToken(tokens, i, "class")
        if tierClass == '"%s"' % INTERVAL_TIER:
            tier, i = _parseIntervalTier(tokens, i)
        else:
            raise errors.FormatError(f"bad format: unsupported tier class {tierClass}")
        tiers.append(tier)

    return {
        "fileType": fileType,
        "xmin": tgMin,
        "xmax": tgMax,
        "tiersExist": tiersExist,
        "size": size,
        "tiers": tiers,
    }


def _parseIntervalTier(tokens: List[str], i: int) -> Tuple[Dict, int]:
    token, i = _fetchToken(tokens, i, "name")
    tierName = _parseString(token, "name")
    token, i = _fetchToken(tokens, i, "xmin")
    tierStartTime = _parseNumber(token, "xmin")
    token, i = _fetchToken(tokens, i, "xmax")
    tierEndTime = _parseNumber(token, "xmax")
    token, i = _fetchToken(tokens, i, "intervals: size")
    size = _parseIndex(token, "intervals: size")

    entryList = []
    for _ in range(size):
        token, i = _fetchToken(tokens, i, "xmin")
        start = _parseNumber(token, "xmin")
        token, i = _fetchToken(tokens, i, "xmax")
        end = _parseNumber(token, "xmax")
        token, i = _fetchToken(tokens, i, "text")
        label = _parseString(token, "text")
        entryList.append(Interval(start, end, label))

    tierDict = {
        "class": INTERVAL_TIER,
        "name": tierName,
        "xmin": tierStartTime,
        "xmax": tierEndTime,
        "size": size,
        "entries": entryList,
    }

    return tierDict, i


def _validateSizes(tg: Dict) -> None:
    if tg["size"] != len(tg["tiers"]):
        raise errors.SizeMismatch("Textgrid", tg["size"], len(tg["tiers"]))

    for tier in tg["tiers"]:
        if tier["size"] != len(tier["entries"]):
            raise errors.SizeMismatch(
                f"Tier '{tier['name']}'", tier["size"], len(tier["entries"])
            )


def getTextgridAsStr(tg: Dict) -> str:
    """
    Converts a textgrid dictionary to the long Praat text format

    Raises:
        SizeMismatch: a declared size disagrees with the number of
            tiers or entries actually present
        FormatError: a tier is neither an interval tier nor a point tier
    """
    _validateSizes(tg)

    labels = constants.TEXTGRID_LABELS
    tiersFlag = TIERS_EXIST if tg["tiersExist"] else TIERS_ABSENT

    outputTxt = ""
    outputTxt += '%s = "%s"\n' % (labels["fileType"], utils.escapeQuotes(tg["fileType"]))
    outputTxt += '%s = "%s"\n\n' % (labels["objectClass"], TEXTGRID_CLASS)
    outputTxt += "%s = %s\n" % (labels["minTimestamp"], my_math.numToStr(tg["xmin"]))
    outputTxt += "%s = %s\n" % (labels["maxTimestamp"], my_math.numToStr(tg["xmax"]))
    outputTxt += "%s? %s\n" % (labels["tiersExist"], tiersFlag)
    outputTxt += "%s = %d\n" % (labels["size"], tg["size"])

    if tg["size"] > 0:
        outputTxt += "item []: \n"
        for tierNum, tier in enumerate(tg["tiers"]):
            outputTxt += TAB + "item [%d]:\n" % (tierNum + 1)
            outputTxt += _tierToLongTextForm(tier)

    return outputTxt


def _tierToLongTextForm(tier: Dict) -> str:
    entryToText: Callable[[Any], str]
    if tier["class"] == INTERVAL_TIER:
        entryToText = _intervalToLongTextForm
    elif tier["class"] == POINT_TIER:
        entryToText = _pointToLongTextForm
    else:
        raise errors.FormatError(f"bad format: unsupported tier class '{tier['class']}'")

    labels = constants.TIER_LABELS
    entryListLabel = constants.ENTRY_LIST_LABELS[tier["class"]]

    text = ""
    text += TAB * 2 + '%s = "%s"\n' % (labels["tierType"], tier["class"])
    text += TAB * 2 + '%s = "%s"\n' % (labels["name"], utils.escapeQuotes(tier["name"]))
    text += TAB * 2 + "%s = %s\n" % (labels["minTimestamp"], my_math.numToStr(tier["xmin"]))
    text += TAB * 2 + "%s = %s\n" % (labels["maxTimestamp"], my_math.numToStr(tier["xmax"]))
    text += TAB * 2 + "%s: %s = %d\n" % (entryListLabel, labels["size"], tier["size"])

    for entryNum, entry in enumerate(tier["entries"]):
        text += TAB * 2 + "%s [%d]:\n" % (entryListLabel, entryNum + 1)
        text += entryToText(entry)

    return text


def _intervalToLongTextForm(interval: Interval) -> str:
    labels = constants.INTERVAL_LABELS
    start, end, label = interval

    text = ""
    text += TAB * 3 + "%s = %s\n" % (labels["start"], my_math.numToStr(start))
    text += TAB * 3 + "%s = %s\n" % (labels["end"], my_math.numToStr(end))
    text += TAB * 3 + '%s = "%s"\n' % (labels["label"], utils.escapeQuotes(label))

    return text


def _pointToLongTextForm(point: Point) -> str:
    labels = constants.POINT_LABELS
    time, label = point

    text = ""
    text += TAB * 3 + "%s = %s\n" % (labels["time"], my_math.numToStr(time))
    text += TAB * 3 + '%s = "%s"\n' % (labels["label"], utils.escapeQuotes(label))

    return text
