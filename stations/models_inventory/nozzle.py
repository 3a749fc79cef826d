# stations/models_inventory/nozzle.py

import uuid

from django.db import models
from django.core.exceptions import ValidationError

from stations.constants import FuelType


class Nozzle(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)

    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.CASCADE,
        related_name="nozzles"
    )
    tank = models.ForeignKey(
        "stations.Tank",
        on_delete=models.CASCADE,
        related_name="nozzles"
    )

    fuel_type = models.CharField(max_length=10, choices=FuelType.choices)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def clean(self):
        if self.tank_id is None:
            return

        if self.fuel_type != self.tank.fuel_type:
            raise ValidationError(
                {"fuel_type": "Nozzle fuel type must match its tank."}
            )

        if self.station_id != self.tank.station_id:
            raise ValidationError(
                {"tank": "Nozzle and tank must belong to the same station."}
            )
