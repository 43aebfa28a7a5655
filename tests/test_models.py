import pytest

from contest_ranking.models import ContestStageStep
from contest_ranking.helpers.ranking_types import RankingType, RANKING_TYPE_LIST, RANKING_UNITS


def test_ranking_type_list_is_complete():
    assert RANKING_TYPE_LIST == [
        "division",
        "attempts_to_top",
        "zone_and_top_realised",
        "attempts_to_one_zone_and_top",
        "attempts_to_two_zones_and_top",
        "highest_hold",
    ]


def test_units_only_for_scored_ranking_types():
    assert RANKING_UNITS == {
        RankingType.DIVISION: ["pts"],
        RankingType.ATTEMPTS_TO_TOP: ["pts"],
        RankingType.ZONE_AND_TOP_REALISED: ["top", "zone"],
    }


def test_parse_ranking_type():
    assert RankingType.parse("division") is RankingType.DIVISION
    assert RankingType.parse("highest_hold") is RankingType.HIGHEST_HOLD
    assert RankingType.parse("lead") is None
    assert RankingType.parse(None) is None


def test_step_rejects_unknown_ranking_type(app):
    with pytest.raises(ValueError):
        ContestStageStep(name="Final", ranking_type="lead")


def test_step_stores_plain_string(app):
    step = ContestStageStep(name="Final", ranking_type=RankingType.ATTEMPTS_TO_TOP)
    assert step.ranking_type == "attempts_to_top"
    assert type(step.ranking_type) is str


def test_contest_id_follows_stage(build):
    b = build()
    assert b.step.contest_id == b.contest.id
    assert b.group.step is b.step


def test_units_for_returns_fresh_copies():
    from contest_ranking.helpers.ranking_types import units_for

    units = units_for("zone_and_top_realised")
    units.append("extra")

    assert units_for(RankingType.ZONE_AND_TOP_REALISED) == ["top", "zone"]
    assert units_for("highest_hold") is None
    assert units_for("lead") is None


def test_contest_is_finished():
    from datetime import datetime, timedelta
    from contest_ranking.helpers.contest import contest_is_finished
    from contest_ranking.models import Contest

    now = datetime(2024, 6, 1, 12, 0)
    open_ended = Contest(name="A", slug="a", is_active=True, end_at=None)
    ended = Contest(name="B", slug="b", is_active=True, end_at=now - timedelta(minutes=1))
    running = Contest(name="C", slug="c", is_active=True, end_at=now + timedelta(hours=1))
    archived = Contest(name="D", slug="d", is_active=False, end_at=None)

    assert contest_is_finished(None) is True
    assert contest_is_finished(open_ended, now=now) is False
    assert contest_is_finished(ended, now=now) is True
    assert contest_is_finished(running, now=now) is False
    assert contest_is_finished(archived, now=now) is True
