# accounts/constants.py

from django.db import models


class UserRole(models.TextChoices):
    STATION_MANAGER = "SM", "Station manager"
    AREA_MANAGER = "AM", "Area manager"
    ADMIN = "ADMIN", "Administrator"


class StationRoles:
    # Roles that must be attached to a station
    ATTACHED = (
        UserRole.STATION_MANAGER,
    )
