import itertools
from datetime import datetime, timedelta

import pytest

from contest_ranking import create_app
from contest_ranking.config import Config
from contest_ranking.extensions import db
from contest_ranking.models import (
    Contest,
    ContestStage,
    ContestStageStep,
    ContestCategory,
    ContestRouteGroup,
    ContestRoute,
    ContestParticipant,
    ContestParticipantAscent,
)
from contest_ranking.helpers.results_cache import invalidate_results_cache


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    RESULTS_CACHE_TTL = 60.0


_slugs = itertools.count(1)


class ContestBuilder:
    """Creates one contest with a single stage/step/route group."""

    def __init__(self, ranking_type="division", end_at=None):
        n = next(_slugs)
        self.contest = Contest(
            name=f"Bloc Party {n}",
            slug=f"bloc-party-{n}",
            start_at=datetime.utcnow() - timedelta(hours=1),
            end_at=end_at,
        )
        self.stage = ContestStage(contest=self.contest, name="Boulder", stage_order=1)
        self.step = self.add_step("Qualification", ranking_type)
        self.group = self.step.route_groups[0]
        db.session.add(self.contest)
        db.session.commit()

    def add_step(self, name, ranking_type):
        step = ContestStageStep(stage=self.stage, name=name, ranking_type=ranking_type)
        ContestRouteGroup(step=step, name=f"{name} routes")
        db.session.add(step)
        db.session.commit()
        return step

    def category(self, name="U16", unisex=False):
        category = ContestCategory(contest=self.contest, name=name, unisex=unisex)
        db.session.add(category)
        db.session.commit()
        return category

    def route(self, number, group=None, disabled=False):
        route = ContestRoute(
            route_group=group or self.group,
            number=number,
            disabled_at=datetime.utcnow() if disabled else None,
        )
        db.session.add(route)
        db.session.commit()
        return route

    def participant(self, category, first_name, genre="female"):
        participant = ContestParticipant(
            contest=self.contest,
            category=category,
            first_name=first_name,
            last_name="Climber",
            genre=genre,
        )
        db.session.add(participant)
        db.session.commit()
        return participant

    def ascent(self, participant, route, realised=True, top_attempt=None, zone_1_attempt=None):
        ascent = ContestParticipantAscent(
            participant=participant,
            route=route,
            realised=realised,
            top_attempt=top_attempt,
            zone_1_attempt=zone_1_attempt,
        )
        db.session.add(ascent)
        db.session.commit()
        return ascent


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    invalidate_results_cache()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def build(app):
    """build(ranking_type=..., end_at=...) -> ContestBuilder"""
    return ContestBuilder
