from datetime import datetime
from sqlalchemy import UniqueConstraint
from contest_ranking.extensions import db

class ContestParticipantAscent(db.Model):
    __tablename__ = "contest_participant_ascent"

    id = db.Column(db.Integer, primary_key=True)

    contest_participant_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_participant.id"),
        nullable=False,
        index=True,
    )

    contest_route_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_route.id"),
        nullable=False,
        index=True,
    )

    # Counted for division scoring
    realised = db.Column(db.Boolean, nullable=False, default=False)

    # Attempt on which the hold was reached; 0 / NULL = not reached
    top_attempt = db.Column(db.Integer, nullable=True)
    zone_1_attempt = db.Column(db.Integer, nullable=True)
    zone_2_attempt = db.Column(db.Integer, nullable=True)

    # Highest-hold formats
    hold_number = db.Column(db.Integer, nullable=True)
    hold_number_plus = db.Column(db.Boolean, nullable=False, default=False)

    registered_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    __table_args__ = (
        UniqueConstraint(
            "contest_participant_id",
            "contest_route_id",
            name="uq_participant_route",
        ),
    )

    participant = db.relationship(
        "ContestParticipant",
        backref=db.backref("ascents", lazy=True),
    )

    route = db.relationship("ContestRoute")
