import pytest

from errors import NotFound, Forbidden, ValidationFailed
from logic import list_criteria, create_criteria, update_criteria, delete_criteria


def test_list_orders_by_display_order_then_creation(factory, hackathon):
    factory.criterion(hackathon, name='Design', display_order=2)
    factory.criterion(hackathon, name='Impact', display_order=1)
    factory.criterion(hackathon, name='Demo', display_order=2)

    names = [c['name'] for c in list_criteria(hackathon.id)]
    assert names == ['Impact', 'Design', 'Demo']


def test_organizer_creates_criterion_with_defaults(hackathon, organizer):
    created = create_criteria(hackathon.id, {'name': 'Innovation'}, organizer.id)

    assert created['name'] == 'Innovation'
    assert created['maxScore'] == 10
    assert created['weight'] == 1.0
    assert created['displayOrder'] == 0
    assert created['hackathonId'] == hackathon.id


def test_admin_may_create_criteria(factory, hackathon):
    admin = factory.member(hackathon, 'admin')
    created = create_criteria(hackathon.id, {'name': 'UX', 'max_score': 5, 'weight': '2.5'}, admin.id)
    assert created['weight'] == 2.5


@pytest.mark.parametrize('role', ['participant', 'judge', 'mentor'])
def test_non_organizer_cannot_create(factory, hackathon, role):
    user = factory.member(hackathon, role)
    with pytest.raises(Forbidden):
        create_criteria(hackathon.id, {'name': 'Nope'}, user.id)


def test_create_on_missing_hackathon(organizer):
    with pytest.raises(NotFound):
        create_criteria(9999, {'name': 'Ghost'}, organizer.id)


@pytest.mark.parametrize('data', [
    {'name': ''},
    {'name': 'X', 'max_score': 0},
    {'name': 'X', 'weight': 0},
    {'name': 'X', 'weight': '-1'},
    {'name': 'X', 'weight': 'heavy'},
    {'name': 'X', 'display_order': 'first'},
    {'name': 'X', 'colour': 'red'},
])
def test_create_rejects_bad_fields(hackathon, organizer, data):
    with pytest.raises(ValidationFailed):
        create_criteria(hackathon.id, data, organizer.id)


def test_update_changes_only_given_fields(factory, hackathon, organizer):
    criterion = factory.criterion(hackathon, name='Impact', max_score=10, weight='2', display_order=3)

    updated = update_criteria(criterion.id, {'max_score': 20}, organizer.id)

    assert updated['maxScore'] == 20
    assert updated['name'] == 'Impact'
    assert updated['weight'] == 2.0
    assert updated['displayOrder'] == 3


def test_update_missing_criterion(organizer):
    with pytest.raises(NotFound):
        update_criteria(4242, {'name': 'x'}, organizer.id)


def test_update_by_judge_is_forbidden(factory, hackathon, judge):
    criterion = factory.criterion(hackathon)
    with pytest.raises(Forbidden):
        update_criteria(criterion.id, {'name': 'x'}, judge.id)


def test_delete_criterion(factory, hackathon, organizer):
    criterion = factory.criterion(hackathon)
    delete_criteria(criterion.id, organizer.id)
    assert list_criteria(hackathon.id) == []


def test_delete_errors(factory, hackathon, organizer, participant):
    criterion = factory.criterion(hackathon)
    with pytest.raises(Forbidden):
        delete_criteria(criterion.id, participant.id)
    with pytest.raises(NotFound):
        delete_criteria(criterion.id + 100, organizer.id)


def test_organizer_of_another_hackathon_is_forbidden(factory, hackathon):
    other = factory.hackathon()
    outsider = factory.member(other, 'organizer')
    criterion = factory.criterion(hackathon)
    with pytest.raises(Forbidden):
        delete_criteria(criterion.id, outsider.id)
