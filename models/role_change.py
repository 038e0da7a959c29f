# models/role_change.py
# Append-only history of role promotions and demotions. Never updated.

from extensions import db


class RoleChange(db.Model):
    __tablename__ = 'role_changes'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    # NULL previous_role = no role record existed; NULL new_role = record removed
    previous_role = db.Column(db.String(20), nullable=True)
    new_role = db.Column(db.String(20), nullable=True)
    changed_by_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    changed_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())
