from datetime import datetime
from contest_ranking.extensions import db

class Contest(db.Model):
    __tablename__ = "contest"

    id = db.Column(db.Integer, primary_key=True)

    # Public-facing name, e.g. "Bloc'Party 2024"
    name = db.Column(db.String(160), nullable=False)

    slug = db.Column(db.String(160), nullable=False, unique=True)

    start_at = db.Column(db.DateTime, nullable=True)
    end_at = db.Column(db.DateTime, nullable=True)

    # Let organisers archive contests without deleting them
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    stages = db.relationship(
        "ContestStage",
        back_populates="contest",
        lazy=True,
        order_by="ContestStage.stage_order",
    )

    categories = db.relationship(
        "ContestCategory",
        back_populates="contest",
        lazy=True,
    )

    participants = db.relationship(
        "ContestParticipant",
        back_populates="contest",
        lazy=True,
    )
