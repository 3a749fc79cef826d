from django.db import models
from django.contrib.auth.models import AbstractUser
from django.core.exceptions import ValidationError

from accounts.constants import UserRole, StationRoles


class User(AbstractUser):
    employee_id = models.CharField(max_length=50, unique=True)
    role = models.CharField(
        max_length=10,
        choices=UserRole.choices,
        default=UserRole.STATION_MANAGER,
    )

    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="employees",
    )

    # Receiver of the cash collected by a station manager
    area_manager = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="station_managers",
        limit_choices_to={"role": UserRole.AREA_MANAGER},
    )

    class Meta:
        ordering = ["employee_id"]

    def __str__(self):
        return f"{self.employee_id} ({self.get_role_display()})"

    @property
    def is_admin_role(self):
        return self.is_superuser or self.role == UserRole.ADMIN

    def resolve_area_manager(self):
        """
        Area manager receiving this user's cash: the personal assignment
        first, then the area manager of the user's station.
        """
        if self.area_manager_id:
            return self.area_manager

        if self.station_id and self.station.area_manager_id:
            return self.station.area_manager

        return None

    def clean(self):
        if self.role in StationRoles.ATTACHED and not self.station_id:
            raise ValidationError(
                {"station": "A station manager must be attached to a station."}
            )

        if self.area_manager_id and self.area_manager_id == self.id:
            raise ValidationError(
                {"area_manager": "A user cannot be their own area manager."}
            )
