# models/criterion.py

from extensions import db
from sqlalchemy import CheckConstraint


class Criterion(db.Model):
    __tablename__ = 'criteria'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String, nullable=False)
    description = db.Column(db.Text, nullable=True)
    max_score = db.Column(db.Integer, nullable=False, default=10)
    weight = db.Column(db.Numeric(5, 2), nullable=False, default=1)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    __table_args__ = (
        CheckConstraint("max_score >= 1", name="check_criterion_max_score"),
        CheckConstraint("weight > 0", name="check_criterion_weight"),
        # Never reuse ids: orphaned scores still reference deleted criteria
        {"sqlite_autoincrement": True},
    )
