from extensions import db


class Team(db.Model):
    __tablename__ = 'teams'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String(100), nullable=False)

    projects = db.relationship('Project', backref='team', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        db.UniqueConstraint('hackathon_id', 'name', name='unique_team_name'),
    )
