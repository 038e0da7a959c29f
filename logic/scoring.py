# logic/scoring.py
# Score ledger: validated upsert of a judge's scores and assignment completion

from flask import current_app

from extensions import db
from errors import Forbidden, ValidationFailed
from models import Score
from .assignments import get_assignment_or_404
from .criteria import hackathon_criteria
from .serializers import assignment_to_dict
from .storage import upsert


def _validate_entries(entries, criteria_by_id):
    """
    Checks the whole batch before anything is written. Returns the rows to
    upsert; a criterion listed twice keeps its last entry.
    """
    rows = {}
    for entry in entries:
        criterion_id = entry.get('criterion_id')
        criterion = None
        if isinstance(criterion_id, int) and not isinstance(criterion_id, bool):
            criterion = criteria_by_id.get(criterion_id)
        if criterion is None:
            raise ValidationFailed(f'Criteria not found: {criterion_id}')

        value = entry.get('score')
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationFailed(f"Score for '{criterion.name}' must be an integer")
        if value < 0 or value > criterion.max_score:
            raise ValidationFailed(f"Score for '{criterion.name}' must be between 0 and {criterion.max_score}")

        rows[criterion_id] = {
            'criterion_id': criterion_id,
            'score': value,
            'feedback': entry.get('feedback'),
        }
    return list(rows.values())


def update_completion(assignment, criteria):
    """
    Recomputes completion from the stored scores, not incrementally, so
    criteria added or removed mid-judging are taken into account.
    """
    required_ids = {c.id for c in criteria}
    scored_ids = {s.criterion_id for s in Score.query.filter_by(assignment_id=assignment.id)}

    if required_ids.issubset(scored_ids):
        if assignment.completed_at is None:
            assignment.completed_at = db.func.now()
            current_app.logger.info("Assignment #%s completed by judge #%s", assignment.id, assignment.judge_id)
    else:
        assignment.completed_at = None


def submit_scores(assignment_id, entries, caller_user_id):
    """
    Stores the judge's scores for one assignment.

    entries is a list of dicts with criterion_id, score and an optional
    feedback. Either every entry is valid and all are saved, or the first
    invalid one raises ValidationFailed and nothing from the call is saved.
    A second submission for the same criterion overwrites the first.
    """
    assignment = get_assignment_or_404(assignment_id)
    if assignment.judge_id != caller_user_id:
        raise Forbidden('Not authorized to submit scores for this assignment')

    criteria = hackathon_criteria(assignment.hackathon_id)
    rows = _validate_entries(entries, {c.id: c for c in criteria})

    for row in rows:
        row['assignment_id'] = assignment.id
    try:
        upsert(Score, rows, ['assignment_id', 'criterion_id'], ['score', 'feedback', 'updated_at'])
        # Rows were written behind the ORM's back
        db.session.expire_all()
        update_completion(assignment, criteria)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return assignment_to_dict(assignment)
