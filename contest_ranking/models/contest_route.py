from contest_ranking.extensions import db

class ContestRoute(db.Model):
    __tablename__ = "contest_route"

    id = db.Column(db.Integer, primary_key=True)

    contest_route_group_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_route_group.id"),
        nullable=False,
        index=True,
    )

    number = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(120), nullable=True)

    # Set when a route is pulled mid-contest; its ascents stop counting
    disabled_at = db.Column(db.DateTime, nullable=True)

    # Used by highest-hold formats
    number_of_holds = db.Column(db.Integer, nullable=True)

    route_group = db.relationship("ContestRouteGroup", back_populates="routes")

    @property
    def disabled(self) -> bool:
        return self.disabled_at is not None
