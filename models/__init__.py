# models/__init__.py
# Model registry

from .user import User
from .hackathon import Hackathon
from .hackathon_user import HackathonUser
from .role_change import RoleChange
from .team import Team
from .project import Project
from .criterion import Criterion
from .judge_assignment import JudgeAssignment
from .score import Score
