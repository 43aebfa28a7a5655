import sys
from flask import current_app

from contest_ranking.models import ContestParticipant
from contest_ranking.helpers.ranking import ContestRanking, UNRANKED
from contest_ranking.helpers.results_cache import get_cached_results, set_cached_results


def results_label(category, genre) -> str:
    if category.unisex or not genre:
        return category.name
    return f"{category.name} ({genre})"


def build_results(step, category, genre=None):
    """
    Build the results table of one category for one step.

    Rows are shaped like:
        {
          "participant_id", "name", "genre",
          "value", "details", "units",
          "position"
        }

    - Non-unisex categories only list participants of `genre`.
    - Ranked rows (value not None) come first, best value first; equal values
      share a position.
    - Unranked rows follow, by name, with position None.

    Cache is per (step_id, category_id, genre_key); ascent writes drop the
    entries of their step.
    """
    genre_key = "all" if category.unisex else (genre or "none")
    cache_key = (step.id, category.id, genre_key)

    cached = get_cached_results(cache_key)
    if cached:
        return cached

    category_label = results_label(category, genre)

    ranking = ContestRanking(step, category, genre)
    if ranking.policy is UNRANKED:
        print(
            f"[RESULTS] Step {step.id} ranking type {step.ranking_type!r} has no scoring policy",
            file=sys.stderr,
        )

    q = ContestParticipant.query.filter(ContestParticipant.contest_category_id == category.id)
    if not category.unisex:
        q = q.filter(ContestParticipant.genre == genre)

    participants = q.all()

    rows = []
    for p in participants:
        participant_scores = ranking.participant_scores(p.id)
        rows.append(
            {
                "participant_id": p.id,
                "name": p.name,
                "genre": p.genre,
                "value": participant_scores["value"],
                "details": participant_scores["details"],
                "units": participant_scores["units"],
            }
        )

    ranked = [r for r in rows if r["value"] is not None]
    unranked = [r for r in rows if r["value"] is None]

    # zone/top values are float sums; compare them rounded so equal
    # results reached in a different order still tie
    ranked.sort(key=lambda r: (-round(r["value"], 6), r["name"]))
    unranked.sort(key=lambda r: r["name"])

    # Assign positions with ties sharing the same place
    pos = 0
    prev_value = None
    for row in ranked:
        k = round(row["value"], 6)
        if k != prev_value:
            pos += 1
        prev_value = k
        row["position"] = pos

    for row in unranked:
        row["position"] = None

    rows = ranked + unranked
    set_cached_results(cache_key, rows, category_label, current_app.config["RESULTS_CACHE_TTL"])
    return rows, category_label
