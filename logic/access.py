# logic/access.py
# Lookups of the collaborators the core consumes: hackathons, users, role records

from extensions import db
from errors import NotFound, Forbidden
from models import Hackathon, HackathonUser, Project, User
from models.hackathon_user import ORGANIZER_ROLES


def get_hackathon_or_404(hackathon_id):
    hackathon = db.session.get(Hackathon, hackathon_id)
    if hackathon is None:
        raise NotFound('Hackathon not found')
    return hackathon


def get_user_or_404(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound('User not found')
    return user


def get_role_record(hackathon_id, user_id):
    return HackathonUser.query.filter_by(hackathon_id=hackathon_id, user_id=user_id).first()


def get_user_role(hackathon_id, user_id):
    record = get_role_record(hackathon_id, user_id)
    return record.role if record else None


def is_user_organizer(hackathon_id, user_id):
    """Organizers and admins of the hackathon count as organizers."""
    return get_user_role(hackathon_id, user_id) in ORGANIZER_ROLES


def require_organizer(hackathon_id, user_id, message):
    if not is_user_organizer(hackathon_id, user_id):
        raise Forbidden(message)


def submitted_projects_query(hackathon_id):
    """Projects that take part in judging: submitted and not archived."""
    return Project.query.filter(
        Project.hackathon_id == hackathon_id,
        Project.status == 'submitted',
        Project.archived_at.is_(None)
    )


def submitted_projects(hackathon_id):
    return submitted_projects_query(hackathon_id).order_by(Project.id).all()
