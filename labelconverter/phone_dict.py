"""
A phone dict rewrites a sequence of timed phonemes using an ordered list of rules.

A phone dict file holds one rule per line:

    key=replacement

The key is one or more phonemes separated by single spaces.  A key with
several phonemes merges that run of phonemes into a single phoneme
spanning all of them.  Rules are tried in the order they appear in the
file and the first one that matches wins, so a rule file controls its
own precedence: a short rule listed before a long rule shadows it.

A single table can be loaded for the whole process with initPhoneDict()
and retrieved with currentPhoneDict().
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from typing_extensions import Literal

from labelconverter.utilities import constants
from labelconverter.utilities import errors
from labelconverter.utilities import utils
from labelconverter.utilities.constants import Token, PHONE_DICT_SEPARATOR


class PhoneDict:
    """An ordered, read-only table of phoneme rewrite rules"""

    def __init__(self, rules: Iterable[Tuple[str, str]]):
        # dicts keep insertion order; a repeated key keeps its first
        # position and takes its last replacement
        self._rulebook: Dict[str, str] = {}
        for key, replacement in rules:
            self._rulebook[key] = replacement

        self._spaceCounts = {key: key.count(" ") for key in self._rulebook}

    def __len__(self):
        return len(self._rulebook)

    def __eq__(self, other):
        return isinstance(other, PhoneDict) and self.rules == other.rules

    def __repr__(self):
        return f"PhoneDict({self.rules})"

    @property
    def rules(self) -> List[Tuple[str, str]]:
        return list(self._rulebook.items())

    def apply(self, tokens: Sequence[Token]) -> List[Token]:
        """
        Rewrites /tokens/ in a single greedy pass from left to right

        At each position, every rule is tried in order.  A rule whose key
        has k spaces needs k + 1 tokens starting at the position; if they
        all exist and their joined text equals the key, they are replaced
        by one token running from the start of the first to the end of the
        last.  Consumed tokens are never looked at again.  A token that no
        rule matches is kept unchanged.
        """
        newTokens: List[Token] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            for key, replacement in self._rulebook.items():
                spaceCount = self._spaceCounts[key]

                if spaceCount == 0:
                    if key == token.text:
                        newTokens.append(Token(replacement, token.start, token.end))
                        break
                else:
                    endI = i + spaceCount + 1
                    if endI > len(tokens):
                        continue

                    span = tokens[i:endI]
                    if key == " ".join(spanToken.text for spanToken in span):
                        newTokens.append(Token(replacement, span[0].start, span[-1].end))
                        i += spaceCount
                        break
            else:
                newTokens.append(token)

            i += 1

        return newTokens


def parsePhoneDictStr(data: Union[bytes, str]) -> PhoneDict:
    """
    Builds a PhoneDict from the contents of a phone dict file

    Raises:
        FormatError: the data is empty or a line has no separator;
            no partial table is ever returned
    """
    data = utils.decodeData(data).strip()
    if data == "":
        raise errors.FormatError("Phone dict contains no rules")

    rules = []
    for line in data.replace("\r\n", "\n").split("\n"):
        line = line.strip()
        if line == "":
            continue

        if PHONE_DICT_SEPARATOR not in line:
            raise errors.FormatError(f"Phone dict rule is missing '{PHONE_DICT_SEPARATOR}': [{line}]")

        key, replacement = line.split(PHONE_DICT_SEPARATOR, 1)
        rules.append((key.strip(), replacement.strip()))

    return PhoneDict(rules)


def openPhoneDict(fnFullPath: str) -> PhoneDict:
    return parsePhoneDictStr(utils.readFile(fnFullPath))


_phoneDict: Optional[PhoneDict] = None


def initPhoneDict(
    fnFullPath: str,
    reportingMode: Literal["silence", "warning", "error"] = "error",
) -> Optional[PhoneDict]:
    """
    Loads the process-wide phone dict from /fnFullPath/

    Args:
        fnFullPath: the phone dict file to load
        reportingMode: what to do if the file cannot be read or parsed;
            'error' raises, 'warning' prints the problem, 'silence' does
            neither.  In every mode a failed load leaves no phone dict
            installed.

    Returns:
        the loaded PhoneDict, or None if loading failed
    """
    global _phoneDict
    utils.validateOption("reportingMode", reportingMode, constants.ErrorReportingMode)

    _phoneDict = None
    try:
        phoneDict = openPhoneDict(fnFullPath)
    except (IOError, errors.FormatError) as e:
        if reportingMode == constants.ErrorReportingMode.ERROR:
            raise
        errorReporter = utils.getErrorReporter(reportingMode)
        errorReporter(errors.FormatError, f"Could not load phone dict '{fnFullPath}': {e}")
        return None

    _phoneDict = phoneDict
    return phoneDict


def isValidPhoneDict() -> bool:
    return _phoneDict is not None


def currentPhoneDict() -> Optional[PhoneDict]:
    return _phoneDict
