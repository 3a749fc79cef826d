# stations/models_pricing.py

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from stations.constants import FuelType


class FuelPrice(models.Model):
    """
    Price history per station and fuel type.
    The active price is the row with the latest effective_from that is
    not in the future.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.CASCADE,
        related_name="fuel_prices"
    )

    fuel_type = models.CharField(max_length=10, choices=FuelType.choices)

    price_per_liter = models.DecimalField(
        max_digits=10,
        decimal_places=2
    )

    effective_from = models.DateTimeField(default=timezone.now)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="fuel_prices_created"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-effective_from", "-created_at"]
        indexes = [
            models.Index(
                fields=["station", "fuel_type", "-effective_from"],
                name="fuelprice_lookup_idx",
            ),
        ]

    def __str__(self):
        return f"{self.station} {self.fuel_type} @ {self.price_per_liter}"
