# seed_contest.py
import random
from datetime import datetime, timedelta

from contest_ranking import create_app
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


def main(num_participants=200, num_routes=20, ranking_type="zone_and_top_realised"):
    app = create_app()
    with app.app_context():
        db.create_all()

        existing = Contest.query.count()
        print(f"Existing contests: {existing}")

        now = datetime.utcnow()
        contest = Contest(
            name=f"Test Contest {existing + 1}",
            slug=f"test-contest-{existing + 1}",
            start_at=now - timedelta(hours=1),
            end_at=now + timedelta(days=1),
        )
        stage = ContestStage(contest=contest, name="Boulder", stage_order=1)
        step = ContestStageStep(stage=stage, name="Qualification", ranking_type=ranking_type)
        group = ContestRouteGroup(step=step, name="Qualification routes")
        routes = [ContestRoute(route_group=group, number=n) for n in range(1, num_routes + 1)]

        categories = [
            ContestCategory(contest=contest, name="U16", unisex=False, order=1),
            ContestCategory(contest=contest, name="Open", unisex=True, order=2),
        ]

        db.session.add(contest)
        db.session.add_all(categories)
        db.session.add_all(routes)
        db.session.flush()

        for i in range(num_participants):
            participant = ContestParticipant(
                contest=contest,
                category=random.choice(categories),
                first_name="Test",
                last_name=f"Climber {i + 1}",
                genre=random.choice(("male", "female")),
            )
            db.session.add(participant)

            for route in random.sample(routes, k=random.randint(0, num_routes)):
                topped = random.random() < 0.5
                zoned = topped or random.random() < 0.6
                db.session.add(
                    ContestParticipantAscent(
                        participant=participant,
                        route=route,
                        realised=topped,
                        top_attempt=random.randint(1, 6) if topped else 0,
                        zone_1_attempt=random.randint(1, 4) if zoned else 0,
                    )
                )

        db.session.commit()
        print(f"Created contest {contest.id} (step {step.id}) with {num_participants} participants.")

if __name__ == "__main__":
    main()
