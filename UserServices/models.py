from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    ROLES = (
        ('employee', 'Employee'),
        ('manager', 'Manager'),
    )
    role = models.CharField(max_length=20, choices=ROLES, default='employee')
    manager = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name='team_members',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.username

    @property
    def name(self):
        return self.get_full_name() or self.username

    def save(self, *args, **kwargs):
        if self.manager_id is not None:
            if self.pk is not None and self.manager_id == self.pk:
                raise ValueError("A user cannot be their own manager.")
            manager = self.manager
            if manager.role != 'manager':
                raise ValueError("Only users with role 'manager' can manage a team.")
            # Walk up the chain: the reporting lines must stay a forest.
            seen = set()
            while manager is not None and manager.pk not in seen:
                if self.pk is not None and manager.pk == self.pk:
                    raise ValueError("Manager assignment would create a reporting cycle.")
                seen.add(manager.pk)
                manager = manager.manager
        super().save(*args, **kwargs)
