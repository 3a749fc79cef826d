# stations/models_inventory/tank.py

import uuid
from decimal import Decimal

from django.db import models
from django.db.models import Q, F
from django.core.exceptions import ValidationError

from stations.constants import FuelType


class Tank(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.CASCADE,
        related_name="tanks"
    )

    fuel_type = models.CharField(max_length=10, choices=FuelType.choices)

    # Litres. NULL = capacity not configured, no upper bound enforced
    capacity = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True
    )
    current_level = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["station", "fuel_type"]
        constraints = [
            models.CheckConstraint(
                condition=Q(current_level__gte=0),
                name="tank_level_not_negative",
            ),
            models.CheckConstraint(
                condition=Q(capacity__isnull=True) | Q(current_level__lte=F("capacity")),
                name="tank_level_within_capacity",
            ),
        ]

    def __str__(self):
        return f"{self.get_fuel_type_display()} – {self.station}"

    def remaining_capacity(self):
        """
        Free volume in the tank, None when capacity is not configured.
        """
        if self.capacity is None:
            return None
        return self.capacity - self.current_level

    def can_receive(self, liters):
        if self.capacity is None:
            return True
        return self.current_level + Decimal(liters) <= self.capacity

    def clean(self):
        if self.current_level is not None and self.current_level < 0:
            raise ValidationError(
                {"current_level": "Tank level cannot be negative."}
            )

        if (
            self.capacity is not None
            and self.current_level is not None
            and self.current_level > self.capacity
        ):
            raise ValidationError(
                {"current_level": "Tank level cannot exceed its capacity."}
            )
