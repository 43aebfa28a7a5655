from flask import Blueprint, request, jsonify

from contest_ranking.models import ContestParticipantAscent
from contest_ranking.helpers.contest import (
    get_step_or_404,
    get_category_for_step_or_400,
    get_participant_for_step_or_400,
    normalize_genre,
)
from contest_ranking.helpers.ranking import ContestRanking
from contest_ranking.helpers.ranking_types import units_for
from contest_ranking.helpers.results import build_results

results_bp = Blueprint("results", __name__)


@results_bp.route("/api/ascents/<int:ascent_id>/scores")
def api_ascent_scores(ascent_id):
    """
    Scores of one ascent.

    The ranking scope comes from the ascent itself:
    - step     -> the step owning the ascent's route group
    - category -> the participant's category
    - genre    -> the participant's genre
    """
    ascent = ContestParticipantAscent.query.get_or_404(ascent_id)

    participant = ascent.participant
    step = ascent.route.route_group.step

    ranking = ContestRanking(step, participant.category, participant.genre)
    scores = ranking.scores(ascent.id)

    return jsonify(
        {
            "ascent_id": ascent.id,
            "contest_participant_id": participant.id,
            "contest_route_id": ascent.contest_route_id,
            "ranking_type": step.ranking_type,
            "value": scores["value"],
            "details": scores["details"],
        }
    )


@results_bp.route("/api/steps/<int:step_id>/participants/<int:participant_id>/scores")
def api_participant_scores(step_id, participant_id):
    """
    Aggregated scores of one participant for a step, in their own
    category (and genre, unless the category is unisex).
    """
    step = get_step_or_404(step_id)
    participant = get_participant_for_step_or_400(step, participant_id)

    ranking = ContestRanking(step, participant.category, participant.genre)
    scores = ranking.participant_scores(participant.id)

    return jsonify(
        {
            "step_id": step.id,
            "contest_participant_id": participant.id,
            "ranking_type": step.ranking_type,
            "value": scores["value"],
            "details": scores["details"],
            "units": scores["units"],
        }
    )


@results_bp.route("/api/steps/<int:step_id>/categories/<int:category_id>/results")
def api_step_results(step_id, category_id):
    """
    Results table of a category for a step.

    Query args:
      genre: "male" / "female" (and short forms); required unless the
             category is unisex.
    """
    step = get_step_or_404(step_id)
    category = get_category_for_step_or_400(step, category_id)

    genre = None
    if not category.unisex:
        genre = normalize_genre(request.args.get("genre"))
        if not genre:
            return "Missing or unknown genre for a non-unisex category", 400

    rows, category_label = build_results(step, category, genre)

    return jsonify(
        {
            "category": category_label,
            "ranking_type": step.ranking_type,
            "units": units_for(step.ranking_type),
            "rows": rows,
        }
    )
