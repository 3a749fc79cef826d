# stations/models_inventory/delivery.py

import uuid

from django.db import models
from django.conf import settings
from django.utils import timezone


class TankerDelivery(models.Model):
    """
    Tanker delivery into one tank.

    Always recorded together with the tank level increase
    (see stations.services.delivery).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    tank = models.ForeignKey(
        "stations.Tank",
        on_delete=models.CASCADE,
        related_name="deliveries"
    )

    liters_delivered = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )

    delivery_date = models.DateTimeField(default=timezone.now)

    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="tanker_deliveries"
    )

    # Supplier ticket / delivery note number
    ticket_number = models.CharField(
        max_length=100,
        blank=True
    )
    notes = models.TextField(blank=True)

    # Tank level right after the delivery was applied
    level_after = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-delivery_date"]
        verbose_name = "Tanker delivery"
        verbose_name_plural = "Tanker deliveries"

    def __str__(self):
        return (
            f"Delivery {self.liters_delivered} L "
            f"– {self.tank} "
            f"– {self.delivery_date.date()}"
        )
