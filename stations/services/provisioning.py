# stations/services/provisioning.py

import logging

from django.db import transaction

from stations.constants import DEFAULT_STATION_FUEL_TYPES
from stations.models_inventory import Tank, Nozzle

logger = logging.getLogger(__name__)


def default_nozzle_name(station, fuel_type, index=1):
    return f"N-{str(station.id)[:8].upper()}-{fuel_type}-{index}"


@transaction.atomic
def provision_default_equipment(station):
    """
    Creates one tank and one nozzle per default fuel type for a station
    that has no tank and no nozzle yet. Capacity is left unset and the
    tanks start empty.

    Returns the created tanks (empty list when the station is configured).
    """

    if station.tanks.exists() or station.nozzles.exists():
        return []

    tanks = []

    for fuel_type in DEFAULT_STATION_FUEL_TYPES:
        tank = Tank.objects.create(
            station=station,
            fuel_type=fuel_type,
            capacity=None,
        )
        Nozzle.objects.create(
            station=station,
            tank=tank,
            fuel_type=fuel_type,
            name=default_nozzle_name(station, fuel_type),
        )
        tanks.append(tank)

    logger.info(
        "Default equipment provisioned for station %s (%s tanks)",
        station.id, len(tanks),
    )

    return tanks
