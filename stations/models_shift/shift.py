# stations/models_shift/shift.py

import uuid

from django.db import models
from django.db.models import Q
from django.conf import settings

from stations.constants import ShiftType, ShiftStatus


class Shift(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.CASCADE,
        related_name="shifts"
    )

    # Position of the shift in its station history, starting at 1.
    sequence = models.PositiveIntegerField(default=0, editable=False)

    shift_type = models.CharField(max_length=10, choices=ShiftType.choices)

    start_time = models.DateTimeField()
    end_time = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=10,
        choices=ShiftStatus.choices,
        default=ShiftStatus.OPEN
    )
    locked = models.BooleanField(default=False)
    locked_at = models.DateTimeField(null=True, blank=True)

    locked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="shifts_locked"
    )
    unlocked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="shifts_unlocked"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-sequence"]
        indexes = [
            models.Index(fields=["station", "sequence"], name="shift_station_seq_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["station"],
                condition=Q(status=ShiftStatus.OPEN, locked=False),
                name="unique_open_shift_per_station",
            ),
        ]

    def __str__(self):
        return (
            f"{self.get_shift_type_display()} shift "
            f"– {self.station} "
            f"– {self.start_time.date()}"
        )

    @property
    def is_current(self):
        return self.status == ShiftStatus.OPEN and not self.locked
