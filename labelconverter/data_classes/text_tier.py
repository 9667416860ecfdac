"""
A TextTier (point tier) is a tier containing an array of points -- data that exists at a specific point in time

Text tiers can be built and written out but are not read back in.
"""
from labelconverter.utilities.constants import Point, POINT_TIER
from labelconverter.data_classes import textgrid_tier


class TextTier(textgrid_tier.TextgridTier[Point]):
    tierType = POINT_TIER
    entryType = Point

    @property
    def lastTimestamp(self) -> float:
        return self._entries[-1].time
