import uuid

from django.db import models
from django.conf import settings


class Station(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    address = models.TextField(blank=True)

    area_manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="managed_stations",
        limit_choices_to={"role": "AM"},
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


# Models split by domain, registered here for app loading
from stations.models_pricing import FuelPrice  # noqa: E402,F401
from stations.models_inventory import Tank, Nozzle, TankerDelivery  # noqa: E402,F401
from stations.models_shift import Shift, NozzleReading, NozzleSale  # noqa: E402,F401
