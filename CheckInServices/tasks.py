# CheckInServices/tasks.py
import logging
from datetime import timedelta

from celery import shared_task
from django.conf import settings
from django.utils import timezone

from CheckInServices.models import CheckIn

logger = logging.getLogger(__name__)


@shared_task
def report_stale_checkins():
    """Log check-ins left open past STALE_CHECKIN_HOURS. Records are not modified."""
    cutoff = timezone.now() - timedelta(hours=settings.STALE_CHECKIN_HOURS)
    stale = CheckIn.objects.select_related('employee', 'client').filter(
        status=CheckIn.CHECKED_IN,
        checkin_time__lt=cutoff,
    ).order_by('checkin_time')

    count = 0
    for checkin in stale:
        count += 1
        logger.warning(
            'Check-in %s for %s at %s still open since %s',
            checkin.id, checkin.employee.username, checkin.client.name, checkin.checkin_time,
        )
    if count:
        logger.info('%s stale check-in(s) found', count)
    return count
