# logic/judges.py
# Judge roster: promotion, demotion and scoring progress of judges

from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from errors import NotFound, Conflict, ValidationFailed
from models import HackathonUser, JudgeAssignment, RoleChange
from models.hackathon_user import ORGANIZER_ROLES
from .access import (
    get_hackathon_or_404, get_user_or_404, get_role_record,
    require_organizer, submitted_projects_query,
)
from .serializers import judge_to_dict


def _completed_count(hackathon_id, user_id):
    return JudgeAssignment.query.filter(
        JudgeAssignment.hackathon_id == hackathon_id,
        JudgeAssignment.judge_id == user_id,
        JudgeAssignment.completed_at.isnot(None)
    ).count()


def list_judges(hackathon_id, caller_user_id):
    """
    Organizers (who may judge as well) come first, then judges. totalProjects
    is the live count of submitted projects.
    """
    require_organizer(hackathon_id, caller_user_id, 'Only organizers can view judges')
    get_hackathon_or_404(hackathon_id)

    total_projects = submitted_projects_query(hackathon_id).count()
    organizers = HackathonUser.query.filter(
        HackathonUser.hackathon_id == hackathon_id,
        HackathonUser.role.in_(('organizer', 'admin'))
    ).order_by(HackathonUser.id).all()
    judges = HackathonUser.query.filter_by(hackathon_id=hackathon_id, role='judge').order_by(HackathonUser.id).all()

    roster = []
    for record, is_organizer in [(o, True) for o in organizers] + [(j, False) for j in judges]:
        roster.append(judge_to_dict(
            record.user,
            projects_scored=_completed_count(hackathon_id, record.user_id),
            total_projects=total_projects,
            is_organizer=is_organizer
        ))
    return roster


def _log_role_change(hackathon_id, user_id, previous_role, new_role, actor_id):
    db.session.add(RoleChange(
        hackathon_id=hackathon_id, user_id=user_id,
        previous_role=previous_role, new_role=new_role, changed_by_id=actor_id
    ))


def add_judge(hackathon_id, target_user_id, caller_user_id):
    """
    Gives the user the judge role. A participant or mentor record is
    overwritten (the previous role is not restored later); organizers and
    admins are refused with Conflict.
    """
    require_organizer(hackathon_id, caller_user_id, 'Only organizers can add judges')
    hackathon = get_hackathon_or_404(hackathon_id)
    user = get_user_or_404(target_user_id)

    record = get_role_record(hackathon.id, user.id)
    if record is not None and record.role == 'judge':
        raise Conflict('User is already a judge for this hackathon')
    if record is not None and record.role in ORGANIZER_ROLES:
        # Organizers already judge; overwriting would demote them
        raise Conflict('Organizers already have judging capabilities and cannot be added as judges')

    previous_role = record.role if record is not None else None
    if record is None:
        db.session.add(HackathonUser(hackathon_id=hackathon.id, user_id=user.id, role='judge'))
    else:
        record.role = 'judge'
    _log_role_change(hackathon.id, user.id, previous_role, 'judge', caller_user_id)

    try:
        db.session.commit()
    except IntegrityError:
        # Another request created the role record first
        db.session.rollback()
        raise Conflict('User is already a member of this hackathon')

    current_app.logger.info("User #%s is now a judge of hackathon #%s (was %s)",
                            user.id, hackathon.id, previous_role or 'no role')
    return judge_to_dict(
        user,
        projects_scored=_completed_count(hackathon.id, user.id),
        total_projects=submitted_projects_query(hackathon.id).count()
    )


def remove_judge(hackathon_id, target_user_id, caller_user_id):
    """Deletes the judge's role record. Only judges can be removed this way."""
    require_organizer(hackathon_id, caller_user_id, 'Only organizers can remove judges')
    hackathon = get_hackathon_or_404(hackathon_id)

    record = get_role_record(hackathon.id, target_user_id)
    if record is None:
        raise NotFound('User is not associated with this hackathon')
    if record.role != 'judge':
        raise ValidationFailed('User is not a judge for this hackathon')

    db.session.delete(record)
    _log_role_change(hackathon.id, target_user_id, 'judge', None, caller_user_id)
    db.session.commit()
    current_app.logger.info("User #%s removed from the judges of hackathon #%s", target_user_id, hackathon.id)
