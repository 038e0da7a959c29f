# routes/judging.py
# JSON endpoints of the judging core

from functools import wraps

from flask import Blueprint, jsonify, request, session

from errors import ValidationFailed
import logic

judging_bp = Blueprint('judging', __name__, url_prefix='/api/judging')

# camelCase request keys -> field names of the core
CRITERION_KEYS = {
    'name': 'name',
    'description': 'description',
    'maxScore': 'max_score',
    'weight': 'weight',
    'displayOrder': 'display_order',
}


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            return jsonify({'error': 'unauthorized', 'message': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationFailed('Request body must be a JSON object')
    return data


def _criterion_fields(data):
    return {CRITERION_KEYS.get(key, key): value for key, value in data.items()}


# --- Criteria ---
@judging_bp.route('/hackathons/<int:hackathon_id>/criteria', methods=['GET'])
@login_required
def get_criteria(hackathon_id):
    return jsonify(logic.list_criteria(hackathon_id))


@judging_bp.route('/hackathons/<int:hackathon_id>/criteria', methods=['POST'])
@login_required
def create_criteria(hackathon_id):
    criterion = logic.create_criteria(hackathon_id, _criterion_fields(_json_body()), session['user_id'])
    return jsonify(criterion), 201


@judging_bp.route('/criteria/<int:criteria_id>', methods=['PUT'])
@login_required
def update_criteria(criteria_id):
    return jsonify(logic.update_criteria(criteria_id, _criterion_fields(_json_body()), session['user_id']))


@judging_bp.route('/criteria/<int:criteria_id>', methods=['DELETE'])
@login_required
def delete_criteria(criteria_id):
    logic.delete_criteria(criteria_id, session['user_id'])
    return '', 204


# --- Judges ---
@judging_bp.route('/hackathons/<int:hackathon_id>/judges', methods=['GET'])
@login_required
def get_judges(hackathon_id):
    return jsonify(logic.list_judges(hackathon_id, session['user_id']))


@judging_bp.route('/hackathons/<int:hackathon_id>/judges', methods=['POST'])
@login_required
def add_judge(hackathon_id):
    user_id = _json_body().get('userId')
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise ValidationFailed('userId is required')
    return jsonify(logic.add_judge(hackathon_id, user_id, session['user_id'])), 201


@judging_bp.route('/hackathons/<int:hackathon_id>/judges/<int:user_id>', methods=['DELETE'])
@login_required
def remove_judge(hackathon_id, user_id):
    logic.remove_judge(hackathon_id, user_id, session['user_id'])
    return '', 204


# --- Assignments and scores ---
@judging_bp.route('/hackathons/<int:hackathon_id>/assignments', methods=['GET'])
@login_required
def get_assignments(hackathon_id):
    return jsonify(logic.list_assignments_for_judge(hackathon_id, session['user_id']))


@judging_bp.route('/assignments/<int:assignment_id>', methods=['GET'])
@login_required
def get_assignment(assignment_id):
    return jsonify(logic.get_assignment(assignment_id, session['user_id']))


@judging_bp.route('/assignments/<int:assignment_id>/scores', methods=['POST'])
@login_required
def submit_scores(assignment_id):
    scores = _json_body().get('scores')
    if not isinstance(scores, list) or not all(isinstance(s, dict) for s in scores):
        raise ValidationFailed('scores must be a list of objects')
    entries = [
        {'criterion_id': s.get('criteriaId'), 'score': s.get('score'), 'feedback': s.get('feedback')}
        for s in scores
    ]
    return jsonify(logic.submit_scores(assignment_id, entries, session['user_id']))


# --- Leaderboard ---
@judging_bp.route('/hackathons/<int:hackathon_id>/leaderboard', methods=['GET'])
@login_required
def get_leaderboard(hackathon_id):
    return jsonify(logic.get_leaderboard(hackathon_id, session['user_id']))
