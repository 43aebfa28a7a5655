from enum import Enum
from typing import Optional


class RankingType(str, Enum):
    DIVISION = "division"
    ATTEMPTS_TO_TOP = "attempts_to_top"
    ZONE_AND_TOP_REALISED = "zone_and_top_realised"
    ATTEMPTS_TO_ONE_ZONE_AND_TOP = "attempts_to_one_zone_and_top"
    ATTEMPTS_TO_TWO_ZONES_AND_TOP = "attempts_to_two_zones_and_top"
    HIGHEST_HOLD = "highest_hold"

    @classmethod
    def parse(cls, raw) -> Optional["RankingType"]:
        """Return the matching member, or None for anything unrecognised."""
        try:
            return cls(raw)
        except ValueError:
            return None


RANKING_TYPE_LIST = [t.value for t in RankingType]

# Display labels for the `details` of a participant's scores
RANKING_UNITS = {
    RankingType.DIVISION: ["pts"],
    RankingType.ATTEMPTS_TO_TOP: ["pts"],
    RankingType.ZONE_AND_TOP_REALISED: ["top", "zone"],
}


def units_for(ranking_type) -> Optional[list]:
    """Fresh copy of the unit labels of a ranking type, None when it has none."""
    units = RANKING_UNITS.get(RankingType.parse(ranking_type))
    return list(units) if units else None
