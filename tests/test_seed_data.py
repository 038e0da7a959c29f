from models import Hackathon, Project, Criterion, HackathonUser
from logic import get_leaderboard, list_assignments_for_judge


def test_seed_demo_command(app):
    result = app.test_cli_runner().invoke(args=['seed-demo'])

    assert result.exit_code == 0, result.output
    assert 'Demo Hackathon 2026' in result.output
    hackathon = Hackathon.query.one()
    assert Criterion.query.count() == 3
    assert Project.query.filter_by(status='submitted').count() == 2

    judge = HackathonUser.query.filter_by(role='judge').first()
    organizer = HackathonUser.query.filter_by(role='organizer').one()
    assert len(list_assignments_for_judge(hackathon.id, judge.user_id)) == 2
    assert len(get_leaderboard(hackathon.id, organizer.user_id)) == 2


def test_seed_demo_replaces_previous_data(app):
    runner = app.test_cli_runner()
    runner.invoke(args=['seed-demo'])
    result = runner.invoke(args=['seed-demo'])

    assert result.exit_code == 0, result.output
    assert Hackathon.query.count() == 1
