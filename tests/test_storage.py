from extensions import db
from logic.storage import insert_ignore_conflicts, upsert
from models import JudgeAssignment, Score


def test_insert_ignore_skips_conflicting_rows(factory, hackathon, judge):
    project = factory.project(hackathon)
    row = {'hackathon_id': hackathon.id, 'judge_id': judge.id, 'project_id': project.id}

    insert_ignore_conflicts(JudgeAssignment, [row], ['judge_id', 'project_id'])
    insert_ignore_conflicts(JudgeAssignment, [row], ['judge_id', 'project_id'])
    db.session.commit()

    assert JudgeAssignment.query.count() == 1


def test_upsert_overwrites_update_columns(factory, hackathon, judge):
    project = factory.project(hackathon)
    criterion = factory.criterion(hackathon)
    assignment = JudgeAssignment(hackathon_id=hackathon.id, judge_id=judge.id, project_id=project.id)
    db.session.add(assignment)
    db.session.commit()

    key = {'assignment_id': assignment.id, 'criterion_id': criterion.id}
    upsert(Score, [dict(key, score=3, feedback='first')], ['assignment_id', 'criterion_id'], ['score', 'feedback'])
    upsert(Score, [dict(key, score=9, feedback=None)], ['assignment_id', 'criterion_id'], ['score', 'feedback'])
    db.session.commit()

    scores = Score.query.all()
    assert [(s.score, s.feedback) for s in scores] == [(9, None)]


def test_empty_rows_are_a_no_op(app):
    insert_ignore_conflicts(JudgeAssignment, [], ['judge_id', 'project_id'])
    upsert(Score, [], ['assignment_id', 'criterion_id'], ['score'])
