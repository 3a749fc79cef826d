# stations/constants.py

from django.db import models


class FuelType(models.TextChoices):
    OCTANE_91 = "91", "91 octane"
    OCTANE_95 = "95", "95 octane"
    DIESEL = "DIESEL", "Diesel"


class ShiftType(models.TextChoices):
    DAY = "DAY", "Day"
    NIGHT = "NIGHT", "Night"


class ShiftStatus(models.TextChoices):
    OPEN = "OPEN", "Open"
    CLOSED = "CLOSED", "Closed"
    LOCKED = "LOCKED", "Locked"


# Start hour of each shift type (local time)
SHIFT_START_HOURS = {
    ShiftType.DAY: 0,
    ShiftType.NIGHT: 12,
}

# Default equipment provisioned for a station without any tank
DEFAULT_STATION_FUEL_TYPES = (
    FuelType.OCTANE_91,
    FuelType.OCTANE_95,
    FuelType.DIESEL,
)
