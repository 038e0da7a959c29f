# logic/criteria.py
# Criteria store: ordered scoring criteria of a hackathon

from decimal import Decimal, InvalidOperation

from flask import current_app

from extensions import db
from errors import NotFound, ValidationFailed
from models import Criterion
from .access import get_hackathon_or_404, require_organizer
from .serializers import criterion_to_dict

CRITERION_FIELDS = ('name', 'description', 'max_score', 'weight', 'display_order')


def _clean_fields(data, partial):
    """
    Validates the criterion fields present in data and returns them converted.
    With partial=False the name is required and missing fields get defaults.
    """
    unknown = set(data) - set(CRITERION_FIELDS)
    if unknown:
        raise ValidationFailed(f'Unknown criterion fields: {", ".join(sorted(unknown))}')

    cleaned = {}
    if 'name' in data or not partial:
        name = (data.get('name') or '').strip()
        if not name:
            raise ValidationFailed('Criterion name is required')
        cleaned['name'] = name

    if 'description' in data:
        cleaned['description'] = data['description']

    if 'max_score' in data or not partial:
        max_score = data.get('max_score', 10)
        if isinstance(max_score, bool) or not isinstance(max_score, int) or max_score < 1:
            raise ValidationFailed('Max score must be an integer of at least 1')
        cleaned['max_score'] = max_score

    if 'weight' in data or not partial:
        try:
            weight = Decimal(str(data.get('weight', 1)))
        except InvalidOperation:
            raise ValidationFailed('Weight must be a number')
        if not weight.is_finite() or weight <= 0:
            raise ValidationFailed('Weight must be greater than 0')
        cleaned['weight'] = weight

    if 'display_order' in data or not partial:
        display_order = data.get('display_order', 0)
        if isinstance(display_order, bool) or not isinstance(display_order, int):
            raise ValidationFailed('Display order must be an integer')
        cleaned['display_order'] = display_order

    return cleaned


def hackathon_criteria(hackathon_id):
    # Equal display orders keep creation order
    return Criterion.query.filter_by(hackathon_id=hackathon_id).order_by(
        Criterion.display_order, Criterion.id
    ).all()


def list_criteria(hackathon_id):
    return [criterion_to_dict(c) for c in hackathon_criteria(hackathon_id)]


def create_criteria(hackathon_id, data, acting_user_id):
    hackathon = get_hackathon_or_404(hackathon_id)
    require_organizer(hackathon.id, acting_user_id, 'Only organizers can create judging criteria')

    criterion = Criterion(hackathon_id=hackathon.id, **_clean_fields(data, partial=False))
    db.session.add(criterion)
    db.session.commit()
    current_app.logger.info("Criterion '%s' (#%s) created for hackathon #%s",
                            criterion.name, criterion.id, hackathon.id)
    return criterion_to_dict(criterion)


def _get_criterion_or_404(criteria_id):
    criterion = db.session.get(Criterion, criteria_id)
    if criterion is None:
        raise NotFound('Judging criteria not found')
    return criterion


def update_criteria(criteria_id, data, acting_user_id):
    """Only the fields present in data change; the rest keep their values."""
    criterion = _get_criterion_or_404(criteria_id)
    require_organizer(criterion.hackathon_id, acting_user_id, 'Only organizers can update judging criteria')

    for field, value in _clean_fields(data, partial=True).items():
        setattr(criterion, field, value)
    db.session.commit()
    current_app.logger.info("Criterion #%s updated", criterion.id)
    return criterion_to_dict(criterion)


def delete_criteria(criteria_id, acting_user_id):
    # Existing scores are left in place as orphans; the leaderboard only
    # reads scores of criteria that still exist.
    criterion = _get_criterion_or_404(criteria_id)
    require_organizer(criterion.hackathon_id, acting_user_id, 'Only organizers can delete judging criteria')

    db.session.delete(criterion)
    db.session.commit()
    current_app.logger.info("Criterion #%s deleted from hackathon #%s", criteria_id, criterion.hackathon_id)
