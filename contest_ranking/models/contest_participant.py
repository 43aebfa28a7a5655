from datetime import datetime
from contest_ranking.extensions import db

class ContestParticipant(db.Model):
    __tablename__ = "contest_participant"

    id = db.Column(db.Integer, primary_key=True)

    contest_id = db.Column(
        db.Integer,
        db.ForeignKey("contest.id"),
        nullable=False,
        index=True,
    )

    contest_category_id = db.Column(
        db.Integer,
        db.ForeignKey("contest_category.id"),
        nullable=False,
        index=True,
    )

    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)

    # "male" / "female"
    genre = db.Column(db.String(20), nullable=False)

    email = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    contest = db.relationship("Contest", back_populates="participants")
    category = db.relationship("ContestCategory")

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
