import os

from celery import Celery
from celery.schedules import crontab

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'attendtrack.settings')

app = Celery('attendtrack')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()

app.conf.beat_schedule = {
    # Hourly, read-only; open check-ins are never closed automatically.
    'report-stale-checkins': {
        'task': 'CheckInServices.tasks.report_stale_checkins',
        'schedule': crontab(minute=0),
    },
}
