from typing import List, Optional


class LabelConverterException(Exception):
    pass


class ArgumentError(LabelConverterException):
    pass


class WrongOption(LabelConverterException):
    def __init__(self, argumentName: str, givenValue: str, availableOptions: List[str]):
        self.argumentName = argumentName
        self.givenValue = givenValue
        self.availableOptions = availableOptions

    def __str__(self):
        return (
            f"For argument '{self.argumentName}' was given the value '{self.givenValue}'. "
            f"However, expected one of [{', '.join(self.availableOptions)}]"
        )


class ParseError(LabelConverterException):
    """A field is missing or could not be decoded into a number, index, boolean or string"""

    def __init__(self, fieldName: str, rawValue: Optional[str], line: Optional[str] = None):
        super(ParseError, self).__init__()
        self.fieldName = fieldName
        self.rawValue = rawValue
        self.line = line

    def __str__(self):
        if self.rawValue is None:
            retString = f"Field '{self.fieldName}' is missing"
        else:
            retString = f"Could not parse field '{self.fieldName}' from value '{self.rawValue}'"
        if self.line is not None:
            retString += f" in line '{self.line}'"
        return retString


class FormatError(LabelConverterException):
    pass


class SizeMismatch(FormatError):
    def __init__(self, owner: str, declaredSize: int, actualSize: int):
        super(SizeMismatch, self).__init__()
        self.owner = owner
        self.declaredSize = declaredSize
        self.actualSize = actualSize

    def __str__(self):
        return (
            f"{self.owner} declares a size of {self.declaredSize} "
            f"but contains {self.actualSize} entries"
        )


class IncompatibleTierError(LabelConverterException):
    pass
