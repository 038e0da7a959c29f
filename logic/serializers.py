# logic/serializers.py
# DTO dictionaries returned by the core (camelCase keys, as the HTTP layer sends them)


def _iso(value):
    return value.isoformat() if value is not None else None


def criterion_to_dict(criterion):
    return {
        'id': criterion.id,
        'hackathonId': criterion.hackathon_id,
        'name': criterion.name,
        'description': criterion.description,
        'maxScore': criterion.max_score,
        'weight': float(criterion.weight),
        'displayOrder': criterion.display_order,
    }


def score_to_dict(score):
    return {
        'id': score.id,
        'criteriaId': score.criterion_id,
        'criteriaName': score.criterion.name,
        'score': score.score,
        'maxScore': score.criterion.max_score,
        'feedback': score.feedback,
    }


def assignment_to_dict(assignment, include_scores=True):
    data = {
        'id': assignment.id,
        'hackathonId': assignment.hackathon_id,
        'judgeId': assignment.judge_id,
        'projectId': assignment.project_id,
        'projectName': assignment.project.name,
        'assignedAt': _iso(assignment.assigned_at),
        'completedAt': _iso(assignment.completed_at),
    }
    if include_scores:
        # Scores of a deleted criterion are orphans and are not shown
        data['scores'] = [score_to_dict(s) for s in assignment.scores if s.criterion is not None]
    return data


def judge_to_dict(user, projects_scored, total_projects, is_organizer=False):
    return {
        'userId': user.id,
        'email': user.email,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'displayName': user.display_name,
        'projectsScored': projects_scored,
        'totalProjects': total_projects,
        'isOrganizer': is_organizer,
    }
