from contest_ranking.extensions import db

class ContestRouteGroup(db.Model):
    __tablename__ = "contest_route_group"

    id = db.Column(db.Integer, primary_key=True)

    contest_stage_step_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_stage_step.id"),
        nullable=False,
        index=True,
    )

    name = db.Column(db.String(120), nullable=True)

    step = db.relationship("ContestStageStep", back_populates="route_groups")

    routes = db.relationship(
        "ContestRoute",
        back_populates="route_group",
        lazy=True,
        order_by="ContestRoute.number",
    )
