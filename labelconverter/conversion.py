"""
Converts between lab files and textgrids.

Lab timestamps are ticks (100ns) and textgrid timestamps are seconds.
Tokens are scaled exactly once when they cross from one format to the
other, and the phone dict, if one is given, is applied to the scaled
tokens.
"""
from typing import List, Optional, Sequence, Tuple

from typing_extensions import Literal

from labelconverter.data_classes.interval_tier import IntervalTier
from labelconverter.data_classes.lab import Lab
from labelconverter.data_classes.textgrid import Textgrid
from labelconverter.phone_dict import PhoneDict
from labelconverter.utilities import constants
from labelconverter.utilities import errors
from labelconverter.utilities import utils
from labelconverter.utilities.constants import Interval, Token, TICKS_PER_SECOND


def secondsToTicks(seconds: float) -> float:
    return seconds * TICKS_PER_SECOND


def ticksToSeconds(ticks: float) -> float:
    return ticks / TICKS_PER_SECOND


def labToTokens(lab: Lab) -> List[Token]:
    """The lines of /lab/ as tokens in seconds"""
    return [
        Token(token.text, ticksToSeconds(token.start), ticksToSeconds(token.end))
        for token in lab.tokens()
    ]


def tokensToLab(tokens: Sequence[Token]) -> Lab:
    """Builds a Lab from tokens that are already in ticks"""
    return Lab([(token.start, token.end, token.text) for token in tokens])


def tierToTokens(tier: IntervalTier) -> List[Token]:
    """The intervals of /tier/ as tokens in ticks"""
    return [
        Token(label, secondsToTicks(start), secondsToTicks(end))
        for start, end, label in tier
    ]


def tokensToIntervalTier(name: str, tokens: Sequence[Token]) -> IntervalTier:
    """Builds an IntervalTier starting at 0 from tokens that are already in seconds"""
    intervals = [Interval(token.start, token.end, token.text) for token in tokens]
    return IntervalTier(name, intervals, 0)


def labToTextgrid(
    lab: Lab,
    phoneDict: Optional[PhoneDict] = None,
    tierName: str = constants.DEFAULT_TIER_NAME,
    fileType: str = constants.DEFAULT_FILE_TYPE,
) -> Textgrid:
    """
    Builds a textgrid with a single interval tier from a lab

    The textgrid and its tier start at 0 and end where the last
    interval ends (or at 0 if the lab is empty).
    """
    tokens = labToTokens(lab)
    if phoneDict is not None:
        tokens = phoneDict.apply(tokens)

    tier = tokensToIntervalTier(tierName, tokens)

    return Textgrid([tier], 0, tier.maxTimestamp, fileType)


def textgridToLabs(
    tg: Textgrid,
    phoneDict: Optional[PhoneDict] = None,
    reportingMode: Literal["silence", "warning", "error"] = "warning",
) -> List[Tuple[str, Lab]]:
    """
    Builds one lab per interval tier of /tg/

    Args:
        tg: the textgrid to convert
        phoneDict: if given, applied to the phonemes of each tier
        reportingMode: how to handle tiers that are not interval tiers;
            they are skipped unless this is 'error'

    Returns:
        a list of (tierName, Lab) in tier order
    """
    utils.validateOption("reportingMode", reportingMode, constants.ErrorReportingMode)
    errorReporter = utils.getErrorReporter(reportingMode)

    labs = []
    for tierIndex, tier in enumerate(tg.tiers):
        if not isinstance(tier, IntervalTier):
            errorReporter(
                errors.IncompatibleTierError,
                f"Tier '{tier.name}' (index: {tierIndex}) is a {tier.tierType} "
                f"and cannot be written as a lab",
            )
            continue

        tokens = tierToTokens(tier)
        if phoneDict is not None:
            tokens = phoneDict.apply(tokens)

        labs.append((tier.name, tokensToLab(tokens)))

    return labs
