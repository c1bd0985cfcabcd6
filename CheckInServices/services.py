"""
Check-in lifecycle.

An employee is either idle or has exactly one active (``checked_in``) record.
Checking in opens a record, checking out closes the most recent one. The
partial unique constraint on ``CheckIn`` backs the single-active rule at
commit time; the read before the insert only gives a friendlier error.
"""
import logging
from typing import NamedTuple, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from attendtrack.exceptions import Conflict, Forbidden, InvalidRequest, NotFound, persistence_guard
from CheckInServices.geo import haversine_km
from CheckInServices.models import CheckIn
from CheckInServices.validators import is_assigned, is_direct_report
from ClientServices.models import Client

logger = logging.getLogger(__name__)


class ActingEmployee(NamedTuple):
    employee_id: int
    on_behalf: bool


class CheckInResult(NamedTuple):
    id: int
    distance_from_client: float
    distance_warning: Optional[str]


def _resolve_self(requester, employee_id):
    return ActingEmployee(employee_id=requester.id, on_behalf=False)


def _resolve_team_member(requester, employee_id):
    if employee_id in (None, ''):
        raise InvalidRequest('employee_id is required for managers')
    if not is_direct_report(requester.id, employee_id):
        raise Forbidden('Employee does not belong to your team')
    return ActingEmployee(employee_id=int(employee_id), on_behalf=True)


ACTING_EMPLOYEE_RESOLVERS = {
    'employee': _resolve_self,
    'manager': _resolve_team_member,
}


def resolve_acting_employee(requester, employee_id=None):
    """Pick whose check-in this is: the requester, or a manager's direct report."""
    resolver = ACTING_EMPLOYEE_RESOLVERS.get(getattr(requester, 'role', None))
    if resolver is None:
        raise Forbidden('Your role cannot submit check-ins')
    return resolver(requester, employee_id)


def distance_warning(distance_km):
    threshold = settings.CHECKIN_DISTANCE_WARNING_KM
    if distance_km > threshold:
        return f'You are {distance_km:.2f} km away from the client location (more than {threshold} km)'
    return None


class CheckInService:

    @staticmethod
    def _active_queryset(employee_id):
        return CheckIn.objects.filter(
            employee_id=employee_id,
            status=CheckIn.CHECKED_IN,
        ).order_by('-checkin_time', '-id')

    @staticmethod
    @persistence_guard
    def submit_check_in(requester, client_id, latitude, longitude, notes=None, employee_id=None):
        if client_id in (None, '') or latitude is None or longitude is None:
            raise InvalidRequest('Client ID and location are required')

        acting = resolve_acting_employee(requester, employee_id)

        if not is_assigned(acting.employee_id, client_id):
            logger.warning('Check-in denied: employee %s is not assigned to client %s', acting.employee_id, client_id)
            raise Forbidden('Employee is not assigned to this client')

        if CheckInService._active_queryset(acting.employee_id).exists():
            raise Conflict('Employee already has an active check-in')

        client = Client.objects.filter(pk=client_id).first()
        if client is None or not client.has_location:
            raise InvalidRequest('Client location not available')

        distance = haversine_km(latitude, longitude, client.latitude, client.longitude)
        warning = distance_warning(distance)

        try:
            with transaction.atomic():
                checkin = CheckIn.objects.create(
                    employee_id=acting.employee_id,
                    client=client,
                    submitted_by=requester if acting.on_behalf else None,
                    latitude=latitude,
                    longitude=longitude,
                    distance_from_client=distance,
                    notes=notes or None,
                    status=CheckIn.CHECKED_IN,
                )
        except IntegrityError:
            # A concurrent request opened a check-in between the read and the insert.
            if CheckInService._active_queryset(acting.employee_id).exists():
                raise Conflict('Employee already has an active check-in')
            raise

        logger.info(
            'Employee %s checked in at client %s (%.2f km away)%s',
            acting.employee_id, client.id, distance,
            f' by manager {requester.id}' if acting.on_behalf else '',
        )
        return CheckInResult(id=checkin.id, distance_from_client=distance, distance_warning=warning)

    @staticmethod
    @persistence_guard
    def check_out(employee_id):
        with transaction.atomic():
            checkin = CheckInService._active_queryset(employee_id).select_for_update().first()
            if checkin is None:
                raise NotFound('No active check-in found')
            checkin.checkout_time = max(timezone.now(), checkin.checkin_time)
            checkin.status = CheckIn.CHECKED_OUT
            checkin.save(update_fields=['checkout_time', 'status'])
        logger.info('Employee %s checked out of check-in %s', employee_id, checkin.id)
        return checkin

    @staticmethod
    @persistence_guard
    def get_active_check_in(employee_id):
        return CheckInService._active_queryset(employee_id).select_related('client').first()

    @staticmethod
    @persistence_guard
    def get_history(employee_id, start_date=None, end_date=None):
        queryset = CheckIn.objects.select_related('client').filter(employee_id=employee_id)
        if start_date:
            queryset = queryset.filter(checkin_time__date__gte=start_date)
        if end_date:
            queryset = queryset.filter(checkin_time__date__lte=end_date)
        return list(queryset.order_by('-checkin_time', '-id'))

    @staticmethod
    @persistence_guard
    def list_clients(requester):
        if requester.role == 'manager':
            queryset = Client.objects.filter(employees__manager_id=requester.id).distinct()
        else:
            queryset = Client.objects.filter(employees=requester)
        return list(queryset.order_by('name'))
