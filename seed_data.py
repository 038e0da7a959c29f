# seed_data.py
# Demo data: one hackathon in judging with an organizer, judges, teams and criteria

from decimal import Decimal

import click
from flask.cli import with_appcontext

from extensions import db
from models import User, Hackathon, HackathonUser, Team, Project, Criterion, JudgeAssignment, Score, RoleChange


def clear_data():
    # Reverse dependency order
    db.session.query(Score).delete()
    db.session.query(JudgeAssignment).delete()
    db.session.query(Criterion).delete()
    db.session.query(Project).delete()
    db.session.query(Team).delete()
    db.session.query(RoleChange).delete()
    db.session.query(HackathonUser).delete()
    db.session.query(Hackathon).delete()
    db.session.query(User).delete()
    db.session.commit()


def seed_demo():
    """Loads the demo hackathon and returns it."""
    organizer = User(email='organizer@example.com', first_name='Olivia', last_name='Organizer')
    judge1 = User(email='judge1@example.com', first_name='Jordan', last_name='Judge')
    judge2 = User(email='judge2@example.com', first_name='Jamie', last_name='Judge', display_name='JJ')
    participant1 = User(email='alex@example.com', first_name='Alex', last_name='Hacker')
    participant2 = User(email='sam@example.com', first_name='Sam', last_name='Builder')
    db.session.add_all([organizer, judge1, judge2, participant1, participant2])

    hackathon = Hackathon(name='Demo Hackathon 2026', status='judging')
    db.session.add(hackathon)
    db.session.flush()

    db.session.add_all([
        HackathonUser(hackathon_id=hackathon.id, user_id=organizer.id, role='organizer'),
        HackathonUser(hackathon_id=hackathon.id, user_id=judge1.id, role='judge'),
        HackathonUser(hackathon_id=hackathon.id, user_id=judge2.id, role='judge'),
        HackathonUser(hackathon_id=hackathon.id, user_id=participant1.id, role='participant'),
        HackathonUser(hackathon_id=hackathon.id, user_id=participant2.id, role='participant'),
    ])

    team_a = Team(hackathon_id=hackathon.id, name='Byte Me')
    team_b = Team(hackathon_id=hackathon.id, name='Null Pointers')
    db.session.add_all([team_a, team_b])
    db.session.flush()

    db.session.add_all([
        Project(hackathon_id=hackathon.id, team_id=team_a.id, name='Snack Tracker', status='submitted', submitted_at=db.func.now()),
        Project(hackathon_id=hackathon.id, team_id=team_b.id, name='Plant Whisperer', status='submitted', submitted_at=db.func.now()),
        Project(hackathon_id=hackathon.id, team_id=team_b.id, name='Abandoned Prototype', status='draft'),
    ])

    db.session.add_all([
        Criterion(hackathon_id=hackathon.id, name='Innovation', max_score=10, weight=Decimal('2.00'), display_order=1),
        Criterion(hackathon_id=hackathon.id, name='Technical execution', max_score=10, weight=Decimal('1.50'), display_order=2),
        Criterion(hackathon_id=hackathon.id, name='Presentation', max_score=5, weight=Decimal('1.00'), display_order=3),
    ])
    db.session.commit()
    return hackathon


@click.command('seed-demo')
@click.option('--clear/--no-clear', default=True, help='Delete existing data first.')
@with_appcontext
def seed_demo_command(clear):
    """Load a demo hackathon for local development."""
    db.create_all()
    if clear:
        click.echo('Clearing old data...')
        clear_data()
    try:
        hackathon = seed_demo()
    except Exception:
        db.session.rollback()
        raise
    click.echo(f"Demo hackathon '{hackathon.name}' (#{hackathon.id}) created.")
