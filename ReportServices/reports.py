from collections import defaultdict
from datetime import timedelta

from django.utils import timezone

from attendtrack.exceptions import Forbidden, persistence_guard
from CheckInServices.models import CheckIn
from CheckInServices.validators import is_direct_report
from ClientServices.models import Client
from UserServices.models import User


def _worked_hours(checkin):
    # Open check-ins have no duration yet.
    if checkin.checkout_time is None:
        return 0.0
    return (checkin.checkout_time - checkin.checkin_time).total_seconds() / 3600.0


@persistence_guard
def manager_dashboard(manager):
    today = timezone.localdate()
    team = User.objects.filter(manager=manager).order_by('username')
    today_checkins = CheckIn.objects.select_related('employee', 'client').filter(
        employee__manager=manager,
        checkin_time__date=today,
    ).order_by('-checkin_time', '-id')
    active_count = CheckIn.objects.filter(
        employee__manager=manager,
        status=CheckIn.CHECKED_IN,
    ).count()
    return {
        'team_members': list(team),
        'today_checkins': list(today_checkins),
        'active_checkins': active_count,
    }


@persistence_guard
def employee_dashboard(employee):
    today = timezone.localdate()
    today_checkins = CheckIn.objects.select_related('client').filter(
        employee=employee,
        checkin_time__date=today,
    ).order_by('-checkin_time', '-id')
    clients = employee.assigned_clients.order_by('name')

    week = CheckIn.objects.filter(
        employee=employee,
        checkin_time__gte=timezone.now() - timedelta(days=7),
    )
    return {
        'today_checkins': list(today_checkins),
        'assigned_clients': list(clients),
        'week_stats': {
            'total_checkins': week.count(),
            'unique_clients': week.order_by().values('client_id').distinct().count(),
        },
    }


@persistence_guard
def daily_summary(manager, day, employee_id=None):
    """Per-employee and team totals for one calendar day, scoped to the manager's team."""
    checkins = CheckIn.objects.select_related('employee').filter(
        employee__manager=manager,
        checkin_time__date=day,
    )
    if employee_id is not None:
        if not is_direct_report(manager.id, employee_id):
            raise Forbidden('Employee does not belong to your team')
        checkins = checkins.filter(employee_id=employee_id)

    per_employee = defaultdict(lambda: {'checkins': 0, 'hours': 0.0, 'clients': set()})
    names = {}
    for checkin in checkins.order_by('employee_id', 'checkin_time'):
        stats = per_employee[checkin.employee_id]
        stats['checkins'] += 1
        stats['hours'] += _worked_hours(checkin)
        stats['clients'].add(checkin.client_id)
        names[checkin.employee_id] = checkin.employee.name

    employees = [
        {
            'employee_id': staff_id,
            'employee_name': names[staff_id],
            'total_checkins': stats['checkins'],
            'working_hours': round(stats['hours'], 2),
            'clients_visited': len(stats['clients']),
        }
        for staff_id, stats in per_employee.items()
    ]
    all_clients = set()
    for stats in per_employee.values():
        all_clients |= stats['clients']

    team_summary = {
        'total_employees': len(employees),
        'total_checkins': sum(row['total_checkins'] for row in employees),
        'total_working_hours': round(sum(stats['hours'] for stats in per_employee.values()), 2),
        'total_clients_visited': len(all_clients),
    }
    return {'team_summary': team_summary, 'employees': employees}
