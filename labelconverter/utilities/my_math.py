import math


def numToStr(inputNum: float) -> str:
    """Renders a number the way it appears in a textgrid: 1.0 -> '1', 0.25 -> '0.25'"""
    if math.isfinite(inputNum) and float(inputNum).is_integer():
        retVal = "%d" % inputNum
    else:
        retVal = "%s" % repr(float(inputNum))
    return retVal


def isclose(a: float, b: float, rel_tol: float = 1e-14, abs_tol: float = 0.0) -> bool:
    return abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
