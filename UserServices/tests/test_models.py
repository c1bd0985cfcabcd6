import pytest

from UserServices.models import User


pytestmark = pytest.mark.django_db


def test_team_members(manager, employee, other_employee):
    assert list(manager.team_members.all()) == [employee]
    assert other_employee.manager is None


def test_cannot_manage_self(manager):
    manager.manager = manager
    with pytest.raises(ValueError, match='own manager'):
        manager.save()


def test_manager_must_have_manager_role(employee, other_employee):
    other_employee.manager = employee
    with pytest.raises(ValueError, match="role 'manager'"):
        other_employee.save()


def test_reporting_cycle_is_rejected(manager):
    director = User.objects.create_user(username='dana', password='s3cret-pass', role='manager')
    manager.manager = director
    manager.save()

    director.manager = manager
    with pytest.raises(ValueError, match='cycle'):
        director.save()


def test_name_falls_back_to_username(other_employee, employee):
    assert other_employee.name == 'olga'
    assert employee.name == 'Eric'
