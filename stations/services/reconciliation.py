# stations/services/reconciliation.py

import logging
import uuid
from collections import defaultdict
from decimal import Decimal, InvalidOperation

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import ValidationError, NotFound

from core.exceptions import Conflict
from stations.models_inventory import Tank, Nozzle
from stations.models_shift import NozzleReading
from stations.services.shift import get_shift_for_update

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def as_decimal(value, field):
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "Invalid number."})


def _as_uuid(value):
    try:
        return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError({"nozzle_id": f"Invalid nozzle id: {value}."})


# ============================================================
# OPENING READING
# ============================================================

def resolve_opening_reading(shift, nozzle):
    """
    Closing reading of the nozzle on the latest earlier shift of the same
    station that recorded one, 0 when there is none.
    """

    previous = (
        NozzleReading.objects
        .filter(
            nozzle=nozzle,
            shift__station_id=shift.station_id,
            shift__sequence__lt=shift.sequence,
            closing_reading__isnull=False,
        )
        .order_by("-shift__sequence")
        .values_list("closing_reading", flat=True)
        .first()
    )

    return previous if previous is not None else ZERO


# ============================================================
# TANK MOVEMENTS
# ============================================================

def _apply_tank_deltas(tank_deltas):
    """
    tank_deltas: {tank_id: litres taken out} (negative gives litres back).

    Every tank is locked, checked, then updated. Any violation rejects the
    whole batch before a single level moves.
    """

    tank_deltas = {k: v for k, v in tank_deltas.items() if v != 0}
    if not tank_deltas:
        return

    tanks = {
        tank.id: tank
        for tank in (
            Tank.objects
            .select_for_update()
            .filter(id__in=tank_deltas.keys())
            .order_by("id")
        )
    }

    for tank_id, delta in tank_deltas.items():
        tank = tanks[tank_id]
        new_level = tank.current_level - delta

        if new_level < 0:
            raise ValidationError(
                f"Insufficient fuel in {tank.get_fuel_type_display()} tank. "
                f"Current: {tank.current_level}L, Needed: {delta}L"
            )
        if tank.capacity is not None and new_level > tank.capacity:
            raise ValidationError(
                f"Correction would overfill {tank.get_fuel_type_display()} tank. "
                f"Capacity: {tank.capacity}L, New Total: {new_level}L"
            )

    now = timezone.now()
    for tank_id, delta in tank_deltas.items():
        Tank.objects.filter(id=tank_id).update(
            current_level=F("current_level") - delta,
            updated_at=now,
        )


# ============================================================
# SUBMIT READINGS
# ============================================================

@transaction.atomic
def submit_shift_readings(shift_id, station_id, readings):
    """
    Upserts the closing readings of a shift and takes the dispensed volume
    out of the tanks.

    readings: iterable of {"nozzle_id", "closing_reading"}.
    Re-submitting a nozzle only moves the tank by the consumption difference.
    """

    shift = get_shift_for_update(shift_id)

    if shift.locked:
        raise Conflict("Shift is locked.")

    if str(shift.station_id) != str(station_id):
        raise ValidationError("Shift does not belong to this station.")

    readings = list(readings or [])
    if not readings:
        raise ValidationError("At least one reading is required.")

    nozzle_ids = [_as_uuid(item.get("nozzle_id")) for item in readings]
    if len(set(nozzle_ids)) != len(nozzle_ids):
        raise ValidationError("Each nozzle can only appear once per submission.")

    nozzles = {
        nozzle.id: nozzle
        for nozzle in Nozzle.objects.filter(id__in=nozzle_ids)
    }

    existing = {
        reading.nozzle_id: reading
        for reading in (
            NozzleReading.objects
            .select_for_update()
            .filter(shift=shift, nozzle_id__in=nozzle_ids)
        )
    }

    tank_deltas = defaultdict(Decimal)
    planned = []

    for nozzle_id, item in zip(nozzle_ids, readings):
        nozzle = nozzles.get(nozzle_id)
        if nozzle is None:
            raise ValidationError(f"Nozzle {nozzle_id} not found.")
        if nozzle.station_id != shift.station_id:
            raise ValidationError(
                f"Nozzle {nozzle.name} does not belong to this station."
            )

        closing = as_decimal(item.get("closing_reading"), "closing_reading")
        current = existing.get(nozzle.id)
        opening = (
            current.opening_reading
            if current is not None
            else resolve_opening_reading(shift, nozzle)
        )

        consumption = closing - opening
        if consumption < 0:
            raise ValidationError(
                f"Invalid reading for nozzle {nozzle.name}: closing reading "
                f"{closing} is below opening reading {opening}."
            )

        previous = (current.consumption or ZERO) if current is not None else ZERO
        tank_deltas[nozzle.tank_id] += consumption - previous
        planned.append((nozzle, current, opening, closing, consumption))

    _apply_tank_deltas(tank_deltas)

    saved = []
    for nozzle, current, opening, closing, consumption in planned:
        if current is None:
            current = NozzleReading.objects.create(
                shift=shift,
                nozzle=nozzle,
                opening_reading=opening,
                closing_reading=closing,
                consumption=consumption,
            )
        else:
            current.closing_reading = closing
            current.consumption = consumption
            current.save(update_fields=[
                "closing_reading", "consumption", "updated_at",
            ])
        saved.append(current)

    logger.info(
        "Readings submitted for shift %s: %s nozzles, %sL",
        shift.id, len(saved), sum(r.consumption for r in saved),
    )

    return saved


@transaction.atomic
def update_shift_reading(shift_id, reading_id, closing_reading):
    shift = get_shift_for_update(shift_id)

    if shift.locked:
        raise Conflict("Shift is locked.")

    reading = (
        NozzleReading.objects
        .select_for_update()
        .select_related("nozzle")
        .filter(id=reading_id, shift=shift)
        .first()
    )
    if reading is None:
        raise NotFound("Reading not found.")

    closing = as_decimal(closing_reading, "closing_reading")
    consumption = closing - reading.opening_reading
    if consumption < 0:
        raise ValidationError(
            f"Closing reading {closing} is below opening reading "
            f"{reading.opening_reading}."
        )

    delta = consumption - (reading.consumption or ZERO)
    _apply_tank_deltas({reading.nozzle.tank_id: delta})

    reading.closing_reading = closing
    reading.consumption = consumption
    reading.save(update_fields=["closing_reading", "consumption", "updated_at"])

    logger.info(
        "Reading %s corrected on shift %s (tank delta %sL)",
        reading.id, shift.id, delta,
    )

    return reading
