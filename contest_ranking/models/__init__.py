from .contest import Contest
from .contest_stage import ContestStage
from .contest_stage_step import ContestStageStep
from .contest_category import ContestCategory
from .contest_route_group import ContestRouteGroup
from .contest_route import ContestRoute
from .contest_participant import ContestParticipant
from .contest_participant_ascent import ContestParticipantAscent

__all__ = [
    "Contest",
    "ContestStage",
    "ContestStageStep",
    "ContestCategory",
    "ContestRouteGroup",
    "ContestRoute",
    "ContestParticipant",
    "ContestParticipantAscent",
]
