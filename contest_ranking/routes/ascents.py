import sys
from flask import Blueprint, request, jsonify

from contest_ranking.extensions import db
from contest_ranking.models import ContestParticipant, ContestParticipantAscent, ContestRoute
from contest_ranking.helpers.contest import contest_is_finished
from contest_ranking.helpers.ranking import ContestRanking
from contest_ranking.helpers.results_cache import invalidate_results_cache

ascents_bp = Blueprint("ascents", __name__)

ATTEMPT_FIELDS = ("top_attempt", "zone_1_attempt", "zone_2_attempt", "hold_number")


def _parse_attempt(raw):
    """
    None stays None; anything else must be a non-negative integer.
    Raises ValueError otherwise.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError("boolean is not an attempt count")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError("attempt count must be a whole number")
    value = int(raw)
    if value < 0:
        raise ValueError("attempt count must be >= 0")
    return value


@ascents_bp.route("/api/ascents", methods=["POST"])
def api_save_ascent():
    """
    Save/upsert an ascent.

    Payload:
      {
        "contest_participant_id": 12,
        "contest_route_id": 34,
        "realised": true,
        "top_attempt": 2,
        "zone_1_attempt": 1,
        "zone_2_attempt": null,
        "hold_number": null
      }

    - DB uniqueness is (contest_participant_id, contest_route_id)
    - Fields missing from the payload keep their stored value on update
    """
    data = request.get_json(force=True, silent=True) or {}

    # ---- parse ids ----
    try:
        participant_id = int(data.get("contest_participant_id", 0))
        route_id = int(data.get("contest_route_id", 0))
    except (TypeError, ValueError):
        return "Invalid contest_participant_id or contest_route_id", 400

    if participant_id <= 0 or route_id <= 0:
        return "Invalid contest_participant_id or contest_route_id", 400

    # ---- parse results ----
    attempts = {}
    for field in ATTEMPT_FIELDS:
        if field not in data:
            continue
        try:
            attempts[field] = _parse_attempt(data.get(field))
        except (TypeError, ValueError):
            return f"Invalid {field}", 400

    realised = data.get("realised")
    if "realised" in data and not isinstance(realised, bool):
        return "Invalid realised, expected true or false", 400

    # ---- participant + route context ----
    participant = ContestParticipant.query.get(participant_id)
    if not participant:
        return "Participant not found", 404

    route = ContestRoute.query.get(route_id)
    if not route:
        return "Route not found", 404

    step = route.route_group.step
    if step.contest_id != participant.contest_id:
        return "Route and participant belong to different contests", 400

    if route.disabled:
        return "Route is disabled", 400

    # Block edits once the contest is finished
    if contest_is_finished(participant.contest):
        return "Contest finished, results locked", 403

    # ---- upsert by (contest_participant_id, contest_route_id) ----
    ascent = (
        ContestParticipantAscent.query
        .filter_by(contest_participant_id=participant_id, contest_route_id=route_id)
        .first()
    )

    if not ascent:
        ascent = ContestParticipantAscent(
            contest_participant_id=participant_id,
            contest_route_id=route_id,
        )
        db.session.add(ascent)

    if realised is not None:
        ascent.realised = realised
    for field, value in attempts.items():
        setattr(ascent, field, value)

    db.session.commit()
    invalidate_results_cache(step.id)

    print(
        f"[ASCENT] Saved ascent {ascent.id} (participant {participant_id}, route {route_id})",
        file=sys.stderr,
    )

    scores = ContestRanking(step, participant.category, participant.genre).scores(ascent.id)

    return jsonify(
        {
            "ok": True,
            "id": ascent.id,
            "contest_participant_id": participant_id,
            "contest_route_id": route_id,
            "realised": ascent.realised,
            "top_attempt": ascent.top_attempt,
            "zone_1_attempt": ascent.zone_1_attempt,
            "zone_2_attempt": ascent.zone_2_attempt,
            "hold_number": ascent.hold_number,
            "scores": scores,
        }
    )


@ascents_bp.route("/api/participants/<int:participant_id>/ascents")
def api_get_ascents(participant_id):
    """
    Return all ascents of this participant, ordered by route.
    """
    participant = ContestParticipant.query.get_or_404(participant_id)

    ascents = (
        ContestParticipantAscent.query
        .join(ContestRoute, ContestRoute.id == ContestParticipantAscent.contest_route_id)
        .filter(ContestParticipantAscent.contest_participant_id == participant.id)
        .order_by(ContestRoute.number.asc(), ContestRoute.id.asc())
        .all()
    )

    out = []
    for a in ascents:
        out.append(
            {
                "id": a.id,
                "contest_route_id": a.contest_route_id,
                "route_number": a.route.number,
                "realised": a.realised,
                "top_attempt": a.top_attempt,
                "zone_1_attempt": a.zone_1_attempt,
                "zone_2_attempt": a.zone_2_attempt,
                "hold_number": a.hold_number,
                "disabled": a.route.disabled,
            }
        )

    return jsonify(out)
