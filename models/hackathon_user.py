# models/hackathon_user.py
# Role record: exactly one mutable role per (hackathon, user)

from extensions import db
from sqlalchemy import CheckConstraint

ROLES = ('participant', 'mentor', 'judge', 'organizer', 'admin')
ORGANIZER_ROLES = ('organizer', 'admin')


class HackathonUser(db.Model):
    __tablename__ = 'hackathon_users'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='participant')
    registered_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    __table_args__ = (
        db.UniqueConstraint('hackathon_id', 'user_id', name='unique_hackathon_user'),
        CheckConstraint(
            "role IN ('participant', 'mentor', 'judge', 'organizer', 'admin')",
            name="check_hackathon_user_role"
        ),
    )
