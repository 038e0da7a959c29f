# models/hackathon.py

from extensions import db
from sqlalchemy import CheckConstraint

HACKATHON_STATUSES = (
    'draft', 'registration_open', 'registration_closed',
    'in_progress', 'judging', 'completed', 'cancelled',
)


class Hackathon(db.Model):
    __tablename__ = 'hackathons'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(30), nullable=False, default='draft')
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    # Criteria are shown in display order everywhere
    criteria = db.relationship(
        'Criterion', backref='hackathon', lazy=True,
        order_by='Criterion.display_order',
        cascade="all, delete-orphan"
    )
    members = db.relationship('HackathonUser', backref='hackathon', lazy=True, cascade="all, delete-orphan")
    teams = db.relationship('Team', backref='hackathon', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'registration_open', 'registration_closed', "
            "'in_progress', 'judging', 'completed', 'cancelled')",
            name="check_hackathon_status"
        ),
    )
