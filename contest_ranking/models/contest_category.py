from sqlalchemy import UniqueConstraint
from contest_ranking.extensions import db

class ContestCategory(db.Model):
    __tablename__ = "contest_category"

    id = db.Column(db.Integer, primary_key=True)

    contest_id = db.Column(
        db.Integer,
        db.ForeignKey("contest.id"),
        nullable=False,
        index=True,
    )

    # e.g. "U16", "Open"
    name = db.Column(db.String(120), nullable=False)

    # When False, results are split by participant genre
    unisex = db.Column(db.Boolean, nullable=False, default=False)

    order = db.Column(db.Integer, nullable=False, default=1)

    contest = db.relationship("Contest", back_populates="categories")

    __table_args__ = (
        UniqueConstraint("contest_id", "name", name="uq_category_contest_name"),
    )
