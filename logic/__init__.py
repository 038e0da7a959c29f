# logic/__init__.py
# Judging core: criteria, assignments, scores, leaderboard, judge roster

from .criteria import list_criteria, create_criteria, update_criteria, delete_criteria
from .assignments import list_assignments_for_judge, get_assignment
from .scoring import submit_scores
from .leaderboard import get_leaderboard
from .judges import list_judges, add_judge, remove_judge
