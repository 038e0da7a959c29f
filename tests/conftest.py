from decimal import Decimal

import pytest

from app import create_app
from config import TestConfig
from extensions import db
from models import User, Hackathon, HackathonUser, Team, Project, Criterion


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class Factory:
    """Builds the rows the judging core reads from its collaborators."""

    def __init__(self):
        self._seq = 0

    def _next(self):
        self._seq += 1
        return self._seq

    def user(self, **kwargs):
        n = self._next()
        user = User(email=kwargs.pop('email', f'user{n}@example.com'),
                    first_name=kwargs.pop('first_name', f'First{n}'),
                    last_name=kwargs.pop('last_name', f'Last{n}'), **kwargs)
        db.session.add(user)
        db.session.commit()
        return user

    def hackathon(self, status='judging', **kwargs):
        hackathon = Hackathon(name=kwargs.pop('name', f'Hackathon {self._next()}'), status=status, **kwargs)
        db.session.add(hackathon)
        db.session.commit()
        return hackathon

    def member(self, hackathon, role, user=None):
        user = user or self.user()
        db.session.add(HackathonUser(hackathon_id=hackathon.id, user_id=user.id, role=role))
        db.session.commit()
        return user

    def project(self, hackathon, name=None, status='submitted', archived=False, team=None):
        n = self._next()
        if team is None:
            team = Team(hackathon_id=hackathon.id, name=f'Team {n}')
            db.session.add(team)
            db.session.flush()
        project = Project(hackathon_id=hackathon.id, team_id=team.id, name=name or f'Project {n}',
                          status=status, archived_at=db.func.now() if archived else None)
        db.session.add(project)
        db.session.commit()
        return project

    def criterion(self, hackathon, name=None, max_score=10, weight='1', display_order=0):
        criterion = Criterion(hackathon_id=hackathon.id, name=name or f'Criterion {self._next()}',
                              max_score=max_score, weight=Decimal(weight), display_order=display_order)
        db.session.add(criterion)
        db.session.commit()
        return criterion


@pytest.fixture
def factory(app):
    return Factory()


@pytest.fixture
def hackathon(factory):
    return factory.hackathon()


@pytest.fixture
def organizer(factory, hackathon):
    return factory.member(hackathon, 'organizer')


@pytest.fixture
def judge(factory, hackathon):
    return factory.member(hackathon, 'judge')


@pytest.fixture
def participant(factory, hackathon):
    return factory.member(hackathon, 'participant')


@pytest.fixture
def login(client):
    def _login(user):
        with client.session_transaction() as sess:
            sess['user_id'] = user.id
    return _login
