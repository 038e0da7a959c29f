# models/judge_assignment.py

from extensions import db


class JudgeAssignment(db.Model):
    __tablename__ = 'judge_assignments'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    judge_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    assigned_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())
    # NULL while in progress; set once every criterion of the hackathon has a score
    completed_at = db.Column(db.DateTime, nullable=True)

    judge = db.relationship('User')
    scores = db.relationship('Score', backref='assignment', lazy=True, cascade="all, delete-orphan",
                             order_by='Score.id')

    __table_args__ = (
        db.UniqueConstraint('judge_id', 'project_id', name='unique_judge_project'),
    )
