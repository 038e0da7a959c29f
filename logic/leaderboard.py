# logic/leaderboard.py
# Leaderboard aggregator: weighted, ranked project totals computed fresh on every read

from collections import defaultdict

from errors import Forbidden
from models import JudgeAssignment, Score
from .access import get_hackathon_or_404, is_user_organizer, submitted_projects
from .criteria import hackathon_criteria


def _check_visibility(hackathon, user_id):
    # Organizers see results at any time, everybody else once the hackathon is over
    if hackathon.status != 'completed' and not is_user_organizer(hackathon.id, user_id):
        raise Forbidden('Results are only available after the hackathon is completed')


def criteria_averages(scores, criteria):
    """
    Mean score per criterion over the judges who scored it, as
    {criterion_id: average}. Criteria nobody scored are left out rather
    than counted as zero; scores of criteria not in `criteria` are ignored.
    """
    values = defaultdict(list)
    known_ids = {c.id for c in criteria}
    for s in scores:
        if s.criterion_id in known_ids:
            values[s.criterion_id].append(s.score)
    return {criterion_id: sum(v) / len(v) for criterion_id, v in values.items()}


def weighted_total(averages, criteria):
    """
    sum(weight * average) / sum(weight) over the criteria that have an
    average. A project without any score totals 0.0.
    """
    numerator = 0.0
    total_weight = 0.0
    for c in criteria:
        if c.id not in averages:
            continue
        weight = float(c.weight)
        numerator += weight * averages[c.id]
        total_weight += weight
    return numerator / total_weight if total_weight > 0 else 0.0


def rank_entries(entries):
    """Sorts by total, best first. sorted() is stable, so ties keep input order."""
    ranked = sorted(entries, key=lambda e: e['totalScore'], reverse=True)
    for position, entry in enumerate(ranked, start=1):
        entry['rank'] = position
    return ranked


def _project_scores(project_id):
    return Score.query.join(JudgeAssignment, Score.assignment_id == JudgeAssignment.id).filter(
        JudgeAssignment.project_id == project_id
    ).all()


def get_leaderboard(hackathon_id, caller_user_id):
    hackathon = get_hackathon_or_404(hackathon_id)
    _check_visibility(hackathon, caller_user_id)

    criteria = hackathon_criteria(hackathon.id)
    if not criteria:
        return []

    projects = submitted_projects(hackathon.id)
    if not projects:
        return []

    entries = []
    for project in projects:
        averages = criteria_averages(_project_scores(project.id), criteria)
        entries.append({
            'rank': None,
            'projectId': project.id,
            'projectName': project.name,
            'teamId': project.team_id,
            'teamName': project.team.name,
            'totalScore': weighted_total(averages, criteria),
            'criteriaAverages': [
                {
                    'criteriaId': c.id,
                    'criteriaName': c.name,
                    'averageScore': averages.get(c.id),
                    'maxScore': c.max_score,
                }
                for c in criteria
            ],
        })

    return rank_entries(entries)
