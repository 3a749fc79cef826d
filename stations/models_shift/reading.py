# stations/models_shift/reading.py

import uuid

from django.db import models
from django.db.models import Q


class NozzleReading(models.Model):
    """
    Meter readings of one nozzle over one shift.

    consumption = closing_reading - opening_reading (litres dispensed).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    shift = models.ForeignKey(
        "stations.Shift",
        on_delete=models.CASCADE,
        related_name="readings"
    )
    nozzle = models.ForeignKey(
        "stations.Nozzle",
        on_delete=models.CASCADE,
        related_name="readings"
    )

    opening_reading = models.DecimalField(max_digits=14, decimal_places=2)
    closing_reading = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True
    )
    consumption = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["nozzle__name"]
        constraints = [
            models.UniqueConstraint(
                fields=["shift", "nozzle"],
                name="unique_reading_per_shift_nozzle",
            ),
            models.CheckConstraint(
                condition=Q(consumption__isnull=True) | Q(consumption__gte=0),
                name="reading_consumption_not_negative",
            ),
        ]

    def __str__(self):
        return f"{self.nozzle} – {self.shift}"
