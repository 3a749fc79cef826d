# stations/services/delivery.py

import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import ValidationError, NotFound

from stations.models_inventory import Tank, TankerDelivery

logger = logging.getLogger(__name__)


# ============================================================
# TANKER DELIVERY → TANK LEVEL UP
# ============================================================

@transaction.atomic
def record_tanker_delivery(
    tank_id,
    liters,
    user,
    station_id=None,
    delivery_date=None,
    ticket_number="",
    notes="",
):
    """
    Records a delivery and raises the tank level in one transaction.

    Rejected when the tank is unknown, when the volume is not positive,
    or when capacity is set and the tank would overflow.
    Returns (delivery, tank).
    """

    try:
        liters = Decimal(liters)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({"liters_delivered": "Invalid volume."})

    if liters <= 0:
        raise ValidationError(
            {"liters_delivered": "Delivered volume must be positive."}
        )

    tank = (
        Tank.objects
        .select_for_update()
        .filter(id=tank_id)
        .first()
    )

    if tank is None:
        raise NotFound("Tank not found.")

    if station_id is not None and str(tank.station_id) != str(station_id):
        raise ValidationError(
            {"tank_id": "Tank does not belong to this station."}
        )

    if not tank.can_receive(liters):
        new_level = tank.current_level + liters
        raise ValidationError(
            "Delivery exceeds tank capacity. "
            f"Capacity: {tank.capacity}L, "
            f"Current: {tank.current_level}L, "
            f"Delivery: {liters}L, "
            f"New Total: {new_level}L"
        )

    delivery = TankerDelivery.objects.create(
        tank=tank,
        liters_delivered=liters,
        delivery_date=delivery_date or timezone.now(),
        recorded_by=user,
        ticket_number=ticket_number or "",
        notes=notes or "",
        level_after=tank.current_level + liters,
    )

    tank.current_level = F("current_level") + liters
    tank.save(update_fields=["current_level", "updated_at"])
    tank.refresh_from_db(fields=["current_level", "updated_at"])

    logger.info(
        "Delivery %s: %sL into tank %s (level now %sL)",
        delivery.id, liters, tank.id, tank.current_level,
    )

    return delivery, tank
