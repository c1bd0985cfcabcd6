from datetime import datetime, timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from attendtrack.exceptions import Forbidden
from CheckInServices.models import CheckIn
from ClientServices.models import Client, EmployeeClientAssignment
from ReportServices.reports import daily_summary, employee_dashboard, manager_dashboard
from UserServices.models import User


pytestmark = pytest.mark.django_db

DAY = datetime(2026, 3, 2).date()


def _at(hour, minute=0, day=DAY):
    return timezone.make_aware(datetime(day.year, day.month, day.day, hour, minute))


def _visit(employee, client, start, end=None):
    return CheckIn.objects.create(
        employee=employee,
        client=client,
        latitude=client.latitude,
        longitude=client.longitude,
        checkin_time=start,
        checkout_time=end,
        status=CheckIn.CHECKED_OUT if end else CheckIn.CHECKED_IN,
    )


@pytest.fixture
def second_site(db):
    return Client.objects.create(name='Beta Noida', latitude=28.5355, longitude=77.3910)


@pytest.fixture
def teammate(manager):
    return User.objects.create_user(username='tina', password='s3cret-pass', first_name='Tina', manager=manager)


class TestDailySummary:

    def test_team_totals(self, manager, employee, teammate, other_employee, client_site, second_site):
        _visit(employee, client_site, _at(9), _at(11))
        _visit(employee, second_site, _at(12), _at(13, 30))
        _visit(teammate, client_site, _at(10), _at(12))
        _visit(teammate, second_site, _at(14))
        _visit(other_employee, client_site, _at(9), _at(17))
        _visit(employee, client_site, _at(9, day=DAY + timedelta(days=1)), _at(10, day=DAY + timedelta(days=1)))

        summary = daily_summary(manager, DAY)

        rows = {row['employee_name']: row for row in summary['employees']}
        assert rows['Eric'] == {
            'employee_id': employee.id,
            'employee_name': 'Eric',
            'total_checkins': 2,
            'working_hours': 3.5,
            'clients_visited': 2,
        }
        assert rows['Tina']['total_checkins'] == 2
        assert rows['Tina']['working_hours'] == 2.0
        assert summary['team_summary'] == {
            'total_employees': 2,
            'total_checkins': 4,
            'total_working_hours': 5.5,
            'total_clients_visited': 2,
        }

    def test_single_employee(self, manager, employee, teammate, client_site):
        _visit(employee, client_site, _at(9), _at(10))
        _visit(teammate, client_site, _at(9), _at(10))

        summary = daily_summary(manager, DAY, employee_id=employee.id)

        assert [row['employee_id'] for row in summary['employees']] == [employee.id]
        assert summary['team_summary']['total_employees'] == 1

    def test_employee_outside_team(self, manager, other_employee):
        with pytest.raises(Forbidden):
            daily_summary(manager, DAY, employee_id=other_employee.id)

    def test_empty_day(self, manager):
        summary = daily_summary(manager, DAY)
        assert summary['employees'] == []
        assert summary['team_summary'] == {
            'total_employees': 0,
            'total_checkins': 0,
            'total_working_hours': 0,
            'total_clients_visited': 0,
        }


class TestDashboards:

    def test_manager_dashboard(self, manager, employee, teammate, other_employee, client_site):
        now = timezone.now()
        _visit(employee, client_site, now)
        _visit(other_employee, client_site, now)

        stats = manager_dashboard(manager)

        assert [u.username for u in stats['team_members']] == ['eric', 'tina']
        assert [c.employee_id for c in stats['today_checkins']] == [employee.id]
        assert stats['active_checkins'] == 1

    def test_employee_dashboard(self, employee, client_site, second_site):
        EmployeeClientAssignment.objects.create(employee=employee, client=client_site)
        now = timezone.now()
        _visit(employee, client_site, now - timedelta(days=3), now - timedelta(days=3) + timedelta(hours=1))
        _visit(employee, second_site, now - timedelta(days=2), now - timedelta(days=2) + timedelta(hours=1))
        _visit(employee, second_site, now - timedelta(days=20), now - timedelta(days=20) + timedelta(hours=1))

        stats = employee_dashboard(employee)

        assert [c.name for c in stats['assigned_clients']] == ['Acme Gurgaon']
        assert stats['week_stats'] == {'total_checkins': 2, 'unique_clients': 2}

    def test_employee_dashboard_follows_assignments(self, employee, client_site, second_site):
        EmployeeClientAssignment.objects.create(employee=employee, client=second_site)
        assignment = EmployeeClientAssignment.objects.create(employee=employee, client=client_site)
        assert [c.name for c in employee_dashboard(employee)['assigned_clients']] == ['Acme Gurgaon', 'Beta Noida']

        assignment.delete()

        assert [c.name for c in employee_dashboard(employee)['assigned_clients']] == ['Beta Noida']


class TestEndpoints:

    def test_daily_summary(self, as_user, manager, employee, client_site):
        _visit(employee, client_site, _at(9), _at(10, 15))

        response = as_user(manager).get(reverse('reports-daily-summary'), {'date': DAY.isoformat()})

        assert response.status_code == 200
        assert response.data['date'] == '2026-03-02'
        assert response.data['team_summary']['total_working_hours'] == 1.25
        assert response.data['employees'][0]['employee_name'] == 'Eric'

    def test_daily_summary_requires_date(self, as_user, manager):
        response = as_user(manager).get(reverse('reports-daily-summary'))
        assert response.status_code == 400
        assert response.data['message'] == 'date is required (YYYY-MM-DD)'

    def test_daily_summary_is_for_managers(self, as_user, employee):
        response = as_user(employee).get(reverse('reports-daily-summary'), {'date': DAY.isoformat()})
        assert response.status_code == 403

    def test_daily_summary_bad_employee_id(self, as_user, manager):
        response = as_user(manager).get(
            reverse('reports-daily-summary'), {'date': DAY.isoformat(), 'employee_id': 'abc'}
        )
        assert response.status_code == 400

    def test_manager_stats(self, as_user, manager, employee, client_site):
        _visit(employee, client_site, timezone.now())

        response = as_user(manager).get(reverse('dashboard-stats'))

        data = response.data['data']
        assert data['team_size'] == 1
        assert data['active_checkins'] == 1
        assert data['today_checkins'][0]['employee_name'] == 'Eric'
        assert data['today_checkins'][0]['client_name'] == 'Acme Gurgaon'

    def test_employee_stats(self, as_user, employee, assignment):
        response = as_user(employee).get(reverse('dashboard-employee'))

        data = response.data['data']
        assert data['assigned_clients'] == [{'id': assignment.client.id, 'name': 'Acme Gurgaon', 'address': 'Cyber City'}]
        assert data['week_stats'] == {'total_checkins': 0, 'unique_clients': 0}
        assert data['today_checkins'] == []
