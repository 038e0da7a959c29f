from extensions import db
from sqlalchemy import CheckConstraint


class Score(db.Model):
    __tablename__ = 'scores'
    id = db.Column(db.Integer, primary_key=True)
    assignment_id = db.Column(db.Integer, db.ForeignKey('judge_assignments.id', ondelete='CASCADE'), nullable=False)
    # Deleting a criterion orphans its scores instead of cascading
    criterion_id = db.Column(db.Integer, db.ForeignKey('criteria.id', ondelete='SET NULL'), nullable=True)
    score = db.Column(db.Integer, nullable=False)
    feedback = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, server_default=db.func.current_timestamp(),
                           onupdate=db.func.current_timestamp())

    criterion = db.relationship('Criterion')

    __table_args__ = (
        db.UniqueConstraint('assignment_id', 'criterion_id', name='unique_assignment_criterion'),
        CheckConstraint("score >= 0", name="check_score"),
    )
