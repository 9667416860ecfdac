"""
Functions for reading/writing/manipulating Textgrid classes.
"""
from typing import Optional, Tuple, List, Iterable, Any, Union

from labelconverter.data_classes.interval_tier import IntervalTier
from labelconverter.data_classes.text_tier import TextTier
from labelconverter.utilities import constants
from labelconverter.utilities import errors
from labelconverter.utilities import my_math
from labelconverter.utilities import textgrid_io
from labelconverter.utilities import utils

Tier = Union[IntervalTier, TextTier]


class Textgrid:
    """A container that stores an ordered list of interval and point tiers.

    Textgrids are used by the Praat software to group tiers.  Each tier
    contains different annotation information for an audio recording.

    Attributes:
        fileType(str): the file type named in the header, kept verbatim
        minTimestamp(float): the start of the textgrid
        maxTimestamp(float): the end of the textgrid
        tiersExist(bool): written out as <exists> or <absent>
        size(int): the declared number of tiers
        tiers(Tuple[Tier]): the ordered tiers
    """

    def __init__(
        self,
        tiers: Iterable[Tier] = (),
        minTimestamp: float = 0,
        maxTimestamp: Optional[float] = None,
        fileType: str = constants.DEFAULT_FILE_TYPE,
        tiersExist: bool = True,
        size: Optional[int] = None,
    ):
        """Constructor for Textgrids.

        Args:
            tiers: the tiers, in order
            minTimestamp: the start of the textgrid
            maxTimestamp: the end of the textgrid; if None, the end
                of the first tier, or minTimestamp if there are no tiers
            fileType: the file type label of the header
            tiersExist: the tiers flag of the header
            size: the declared number of tiers; if None, the number of tiers
        """
        self._tiers: List[Tier] = list(tiers)
        self.fileType = fileType
        self.tiersExist = tiersExist
        self.minTimestamp = float(minTimestamp)

        if maxTimestamp is None:
            maxTimestamp = self._tiers[0].maxTimestamp if self._tiers else minTimestamp
        self.maxTimestamp = float(maxTimestamp)

        self.size = len(self._tiers) if size is None else size

    def __len__(self):
        return len(self._tiers)

    def __iter__(self):
        return iter(self._tiers)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Textgrid)
            and self.fileType == other.fileType
            and my_math.isclose(self.minTimestamp, other.minTimestamp)
            and my_math.isclose(self.maxTimestamp, other.maxTimestamp)
            and self.tiersExist == other.tiersExist
            and self.size == other.size
            and self._tiers == other._tiers
        )

    def __repr__(self):
        return f"Textgrid{(self.fileType, self._tiers, self.minTimestamp, self.maxTimestamp)}"

    @property
    def tiers(self) -> Tuple[Tier, ...]:
        return tuple(self._tiers)

    @property
    def tierNames(self) -> Tuple[str, ...]:
        return tuple(tier.name for tier in self._tiers)

    def getTier(self, tierName: str) -> Tier:
        """Returns the first tier named /tierName/"""
        for tier in self._tiers:
            if tier.name == tierName:
                return tier

        raise errors.ArgumentError(f"Textgrid has no tier named '{tierName}'")

    def save(self, fn: str) -> None:
        """Writes the textgrid in the long Praat text format, encoded as utf-8"""
        utils.writeFile(fn, textgrid_io.getTextgridAsStr(_tgToDictionary(self)))


def _tgToDictionary(tg: Textgrid) -> dict:
    tiers = []
    for tier in tg.tiers:
        tiers.append(
            {
                "class": tier.tierType,
                "name": tier.name,
                "xmin": tier.minTimestamp,
                "xmax": tier.maxTimestamp,
                "size": tier.size,
                "entries": tier.entries,
            }
        )

    return {
        "fileType": tg.fileType,
        "xmin": tg.minTimestamp,
        "xmax": tg.maxTimestamp,
        "tiersExist": tg.tiersExist,
        "size": tg.size,
        "tiers": tiers,
    }


def _dictionaryToTg(tgAsDict: dict) -> Textgrid:
    """Converts a dictionary representation of a textgrid to a Textgrid"""
    tiers: List[Tier] = []
    for tierAsDict in tgAsDict["tiers"]:
        if tierAsDict["class"] == constants.INTERVAL_TIER:
            tier: Tier = IntervalTier(
                tierAsDict["name"],
                tierAsDict["entries"],
                tierAsDict["xmin"],
                tierAsDict["xmax"],
                tierAsDict["size"],
            )
        elif tierAsDict["class"] == constants.POINT_TIER:
            tier = TextTier(
                tierAsDict["name"],
                tierAsDict["entries"],
                tierAsDict["xmin"],
                tierAsDict["xmax"],
                tierAsDict["size"],
            )
        else:
            raise errors.FormatError(f"bad format: unsupported tier class '{tierAsDict['class']}'")
        tiers.append(tier)

    return Textgrid(
        tiers,
        tgAsDict["xmin"],
        tgAsDict["xmax"],
        tgAsDict["fileType"],
        tgAsDict["tiersExist"],
        tgAsDict["size"],
    )
