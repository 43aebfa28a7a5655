from sqlalchemy.orm import validates
from contest_ranking.extensions import db
from contest_ranking.helpers.ranking_types import RankingType, RANKING_TYPE_LIST

class ContestStageStep(db.Model):
    __tablename__ = "contest_stage_step"

    id = db.Column(db.Integer, primary_key=True)

    contest_stage_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_stage.id"),
        nullable=False,
        index=True,
    )

    # e.g. "Qualification", "Final"
    name = db.Column(db.String(120), nullable=False)
    step_order = db.Column(db.Integer, nullable=False, default=1)

    # Scoring policy for every route group of this step
    ranking_type = db.Column(db.String(60), nullable=False)

    # Participants enter their own ascents (vs. judges)
    self_reporting = db.Column(db.Boolean, nullable=False, default=False)

    stage = db.relationship("ContestStage", back_populates="steps")

    route_groups = db.relationship(
        "ContestRouteGroup",
        back_populates="step",
        lazy=True,
    )

    @validates("ranking_type")
    def validate_ranking_type(self, key, value):
        if value not in RANKING_TYPE_LIST:
            raise ValueError(f"Unknown ranking type: {value!r}")
        return RankingType(value).value

    @property
    def contest_id(self):
        return self.stage.contest_id if self.stage else None
