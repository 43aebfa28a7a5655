from datetime import datetime
from typing import Optional
from flask import abort

from contest_ranking.models import Contest, ContestStageStep, ContestCategory, ContestParticipant


def get_step_or_404(step_id: int) -> ContestStageStep:
    return ContestStageStep.query.get_or_404(step_id)


def get_category_for_step_or_400(step, category_id: int) -> ContestCategory:
    """
    Look up a category and make sure it belongs to the same contest as `step`.
    """
    category = ContestCategory.query.get_or_404(category_id)
    if category.contest_id != step.contest_id:
        abort(400, description="Category is not part of this contest")
    return category


def get_participant_for_step_or_400(step, participant_id: int) -> ContestParticipant:
    participant = ContestParticipant.query.get_or_404(participant_id)
    if participant.contest_id != step.contest_id:
        abort(400, description="Participant is not part of this contest")
    return participant


def normalize_genre(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    k = raw.strip().lower()

    if k in ("m", "male", "men", "man", "h", "homme"):
        return "male"
    if k in ("f", "female", "women", "woman", "femme"):
        return "female"

    # unknown genre -> None (caller decides whether that is an error)
    return None


def contest_is_finished(contest: Optional[Contest], now: Optional[datetime] = None) -> bool:
    """
    True once a contest no longer takes results: missing, archived
    (is_active False) or past its end_at (UTC naive).
    """
    if contest is None or not contest.is_active:
        return True
    if contest.end_at is None:
        return False
    return (now or datetime.utcnow()) >= contest.end_at
