"""
An IntervalTier is a tier containing an array of intervals -- data that spans a period of time
"""
from typing import List

from labelconverter.utilities.constants import Interval, INTERVAL_TIER
from labelconverter.data_classes import textgrid_tier


class IntervalTier(textgrid_tier.TextgridTier[Interval]):
    tierType = INTERVAL_TIER
    entryType = Interval

    @property
    def lastTimestamp(self) -> float:
        return self._entries[-1].end

    @property
    def labelList(self) -> List[str]:
        return [entry.label for entry in self._entries]
