# stations/models_shift/sale.py

import uuid
from decimal import Decimal

from django.db import models


class NozzleSale(models.Model):
    """
    Litres sold by one nozzle during one shift.

    price_per_liter is a snapshot of the station price when the shift was
    opened. card_amount / cash_amount are shift-level figures replicated on
    every row of the shift.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    shift = models.ForeignKey(
        "stations.Shift",
        on_delete=models.CASCADE,
        related_name="nozzle_sales"
    )
    nozzle = models.ForeignKey(
        "stations.Nozzle",
        on_delete=models.CASCADE,
        related_name="sales"
    )

    quantity_liters = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00")
    )
    price_per_liter = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00")
    )
    card_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00")
    )
    cash_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["nozzle__name"]
        constraints = [
            models.UniqueConstraint(
                fields=["shift", "nozzle"],
                name="unique_sale_per_shift_nozzle",
            ),
        ]

    def __str__(self):
        return f"{self.nozzle} – {self.quantity_liters} L"

    @property
    def amount(self):
        return self.quantity_liters * self.price_per_liter
