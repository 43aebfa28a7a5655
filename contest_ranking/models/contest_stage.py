from contest_ranking.extensions import db

class ContestStage(db.Model):
    __tablename__ = "contest_stage"

    id = db.Column(db.Integer, primary_key=True)

    contest_id = db.Column(
        db.Integer,
        db.ForeignKey("contest.id"),
        nullable=False,
        index=True,
    )

    name = db.Column(db.String(120), nullable=True)

    # "bouldering", "sport_climbing", "speed_climbing"
    climbing_type = db.Column(db.String(40), nullable=False, default="bouldering")

    stage_order = db.Column(db.Integer, nullable=False, default=1)

    contest = db.relationship("Contest", back_populates="stages")

    steps = db.relationship(
        "ContestStageStep",
        back_populates="stage",
        lazy=True,
        order_by="ContestStageStep.step_order",
    )
