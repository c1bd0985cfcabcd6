from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
from ClientServices.models import Client


class CheckIn(models.Model):
    CHECKED_IN = 'checked_in'
    CHECKED_OUT = 'checked_out'
    STATUS_CHOICES = (
        (CHECKED_IN, 'Checked In'),
        (CHECKED_OUT, 'Checked Out'),
    )

    employee = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='checkins')
    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name='checkins')
    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name='submitted_checkins',
    )
    latitude = models.FloatField()
    longitude = models.FloatField()
    distance_from_client = models.FloatField(blank=True, null=True, help_text="Kilometers between submitted location and client")
    notes = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=CHECKED_IN)
    checkin_time = models.DateTimeField(default=timezone.now)
    checkout_time = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ['-checkin_time', '-id']
        indexes = [
            models.Index(fields=['employee', 'status'], name='checkin_employee_status_idx'),
            models.Index(fields=['checkin_time'], name='checkin_time_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['employee'],
                condition=Q(status='checked_in'),
                name='unique_active_checkin_per_employee',
            ),
        ]

    def __str__(self):
        return f"{self.employee.username} @ {self.client.name} - {self.status} at {self.checkin_time}"
