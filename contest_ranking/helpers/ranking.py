"""
Contest ranking.

A ContestRanking is built for one (step, category, genre) triple. It loads the
ascents in that scope once, then answers any number of score queries:

- scores(ascent_id)               -> {"value", "details"}
- participant_scores(participant) -> {"value", "details", "units"}

A value of None always means "not ranked" and must never be read as zero.
"""
from typing import Optional

from contest_ranking.models import (
    ContestParticipant,
    ContestParticipantAscent,
    ContestRoute,
    ContestRouteGroup,
)
from contest_ranking.helpers.ranking_types import RankingType, units_for

NOT_RANKED = "NR"


def not_ranked() -> dict:
    return {"value": None, "details": [NOT_RANKED]}


# --- Scoring policies ---

class RankingPolicy:
    """
    How one ranking type scores an ascent and folds ascent results together.

    - score(ascent, scope)         -> per-ascent result
    - zero()                       -> empty details accumulator
    - combine(details, ascent_res) -> accumulator with one more ascent folded in

    The base policy ranks nothing.
    """

    def score(self, ascent, scope) -> dict:
        return not_ranked()

    def zero(self):
        return None

    def combine(self, details, ascent_scores):
        return details


class PointsPolicy(RankingPolicy):
    """Details hold a single running points total."""

    def zero(self):
        return [0]

    def combine(self, details, ascent_scores):
        details[0] += ascent_scores["value"]
        return details


class DivisionPolicy(PointsPolicy):
    """1000 points per route, split between everyone who realised it."""

    def score(self, ascent, scope) -> dict:
        sharing = sum(1 for a in scope if a.contest_route_id == ascent.contest_route_id)
        point = 1000 // sharing
        return {"value": point, "details": [point]}


class AttemptsToTopPolicy(PointsPolicy):
    """10 points for a flash, one less per extra attempt. Not floored at 0."""

    def score(self, ascent, scope) -> dict:
        if ascent.top_attempt is None:
            return not_ranked()

        point = 10 - (ascent.top_attempt - 1)
        return {"value": point, "details": [point]}


class ZoneAndTopRealisedPolicy(RankingPolicy):
    """A top is worth 1.001, a zone without top 0.001; details count both."""

    def score(self, ascent, scope) -> dict:
        top = (ascent.top_attempt or 0) > 0
        zone = (ascent.zone_1_attempt or 0) > 0

        value = 0
        if top:
            value = 1.001
        elif zone:
            value = 0.001

        return {"value": value, "details": [top, zone]}

    def zero(self):
        return [0, 0]

    def combine(self, details, ascent_scores):
        top, zone = ascent_scores["details"]
        if top:
            details[0] += 1
        if zone:
            details[1] += 1
        return details


UNRANKED = RankingPolicy()

POLICIES = {
    RankingType.DIVISION: DivisionPolicy(),
    RankingType.ATTEMPTS_TO_TOP: AttemptsToTopPolicy(),
    RankingType.ZONE_AND_TOP_REALISED: ZoneAndTopRealisedPolicy(),
    # Declared formats without scoring rules yet: deliberately left unranked
    RankingType.ATTEMPTS_TO_ONE_ZONE_AND_TOP: UNRANKED,
    RankingType.ATTEMPTS_TO_TWO_ZONES_AND_TOP: UNRANKED,
    RankingType.HIGHEST_HOLD: UNRANKED,
}


def policy_for(ranking_type) -> RankingPolicy:
    kind = RankingType.parse(ranking_type)
    if kind is None:
        return UNRANKED
    return POLICIES[kind]


# --- Scope ---

def ascent_scope(step, category, genre) -> list:
    """
    Ascents of `category` participants on the enabled routes of `step`.

    Non-unisex categories only keep participants of `genre`; division steps
    only keep realised ascents.
    """
    q = (
        ContestParticipantAscent.query
        .join(ContestParticipant, ContestParticipant.id == ContestParticipantAscent.contest_participant_id)
        .join(ContestRoute, ContestRoute.id == ContestParticipantAscent.contest_route_id)
        .join(ContestRouteGroup, ContestRouteGroup.id == ContestRoute.contest_route_group_id)
        .filter(
            ContestParticipant.contest_category_id == category.id,
            ContestRoute.disabled_at == None,
            ContestRouteGroup.contest_stage_step_id == step.id,
        )
    )

    if not category.unisex:
        q = q.filter(ContestParticipant.genre == genre)

    if step.ranking_type == RankingType.DIVISION:
        q = q.filter(ContestParticipantAscent.realised == True)

    return q.order_by(ContestParticipantAscent.id.asc()).all()


class ContestRanking:
    def __init__(self, step, category, genre):
        self.step = step
        self.category = category
        self.genre = genre

        self.ranking_type = RankingType.parse(step.ranking_type)
        self.policy = policy_for(step.ranking_type)

        self.ascents = tuple(ascent_scope(step, category, genre))

    @property
    def units(self) -> Optional[list]:
        return units_for(self.ranking_type)

    def scores(self, ascent_id) -> dict:
        current_ascent = next((a for a in self.ascents if a.id == ascent_id), None)
        if current_ascent is None:
            return not_ranked()

        return self.policy.score(current_ascent, self.ascents)

    def participant_scores(self, participant_id) -> dict:
        value = None
        details = None

        for ascent in self.ascents:
            if ascent.contest_participant_id != participant_id:
                continue

            ascent_scores = self.scores(ascent.id)

            # 0 is a real score; only None is skipped
            if ascent_scores["value"] is None:
                continue

            if value is None:
                value = 0
                details = self.policy.zero()

            value += ascent_scores["value"]
            details = self.policy.combine(details, ascent_scores)

        return {"value": value, "details": details, "units": self.units}
