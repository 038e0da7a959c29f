# logic/assignments.py
# Assignment materializer: one assignment per (judge, submitted project), created on read

from flask import current_app

from extensions import db
from errors import NotFound, Forbidden
from models import JudgeAssignment
from .access import get_hackathon_or_404, get_user_role, is_user_organizer, submitted_projects
from .serializers import assignment_to_dict
from .storage import insert_ignore_conflicts

JUDGING_ROLES = ('judge', 'organizer', 'admin')


def ensure_assignments(hackathon_id, judge_id):
    """
    Makes sure the judge has an assignment for every submitted project of the
    hackathon and returns all of the judge's assignments there.

    Missing rows are written with INSERT ... ON CONFLICT DO NOTHING on
    (judge_id, project_id), so concurrent calls for the same judge never
    produce duplicates and repeated calls are no-ops.
    """
    projects = submitted_projects(hackathon_id)
    existing_project_ids = {
        a.project_id for a in JudgeAssignment.query.filter_by(judge_id=judge_id, hackathon_id=hackathon_id)
    }
    missing = [
        {'hackathon_id': hackathon_id, 'judge_id': judge_id, 'project_id': p.id}
        for p in projects if p.id not in existing_project_ids
    ]
    if missing:
        insert_ignore_conflicts(JudgeAssignment, missing, ['judge_id', 'project_id'])
        db.session.commit()
        current_app.logger.info("Materialized %d assignment(s) for judge #%s in hackathon #%s",
                                len(missing), judge_id, hackathon_id)

    return JudgeAssignment.query.filter_by(judge_id=judge_id, hackathon_id=hackathon_id).order_by(
        JudgeAssignment.id
    ).all()


def list_assignments_for_judge(hackathon_id, judge_user_id):
    get_hackathon_or_404(hackathon_id)
    if get_user_role(hackathon_id, judge_user_id) not in JUDGING_ROLES:
        raise Forbidden('User is not a judge for this hackathon')

    return [assignment_to_dict(a) for a in ensure_assignments(hackathon_id, judge_user_id)]


def get_assignment_or_404(assignment_id):
    assignment = db.session.get(JudgeAssignment, assignment_id)
    if assignment is None:
        raise NotFound('Assignment not found')
    return assignment


def get_assignment(assignment_id, caller_user_id):
    assignment = get_assignment_or_404(assignment_id)
    if assignment.judge_id != caller_user_id and not is_user_organizer(assignment.hackathon_id, caller_user_id):
        raise Forbidden('Not authorized to view this assignment')
    return assignment_to_dict(assignment)
