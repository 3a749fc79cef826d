# stations/services/shift.py

import logging

from django.db import transaction, IntegrityError
from django.db.models import Max
from django.utils import timezone
from rest_framework.exceptions import NotFound

from core.exceptions import Conflict
from stations.constants import ShiftStatus, SHIFT_START_HOURS
from stations.models import Station
from stations.models_shift import Shift

logger = logging.getLogger(__name__)

OPEN_SHIFT_MESSAGE = (
    "There is already an open shift for this station. "
    "Please close it first."
)


def shift_start_time(shift_type, now=None):
    """
    DAY shifts start at midnight, NIGHT shifts at noon (local time, today).
    """
    now = timezone.localtime(now or timezone.now())
    return now.replace(
        hour=SHIFT_START_HOURS[shift_type],
        minute=0,
        second=0,
        microsecond=0,
    )


def get_shift_for_update(shift_id):
    shift = (
        Shift.objects
        .select_for_update()
        .filter(id=shift_id)
        .first()
    )
    if shift is None:
        raise NotFound("Shift not found.")
    return shift


def get_current_shift(station_id):
    return (
        Shift.objects
        .filter(
            station_id=station_id,
            status=ShiftStatus.OPEN,
            locked=False,
        )
        .select_related("station")
        .first()
    )


# ============================================================
# OPENING
# ============================================================

@transaction.atomic
def create_shift(station_id, shift_type, user=None):
    """
    Opens a shift for a station and snapshots current prices on one
    sale row per nozzle.

    The station row is locked so concurrent openings are serialized; the
    partial unique constraint is the last line if they are not.
    """

    # Imported here: sales imports this module.
    from stations.services.sales import initialize_nozzle_sales

    station = (
        Station.objects
        .select_for_update()
        .filter(id=station_id)
        .first()
    )
    if station is None:
        raise NotFound("Station not found.")

    if Shift.objects.filter(
        station=station,
        status=ShiftStatus.OPEN,
        locked=False,
    ).exists():
        raise Conflict(OPEN_SHIFT_MESSAGE)

    last_sequence = (
        Shift.objects
        .filter(station=station)
        .aggregate(last=Max("sequence"))
        .get("last")
    ) or 0

    try:
        with transaction.atomic():
            shift = Shift.objects.create(
                station=station,
                sequence=last_sequence + 1,
                shift_type=shift_type,
                start_time=shift_start_time(shift_type),
                status=ShiftStatus.OPEN,
            )
    except IntegrityError:
        raise Conflict(OPEN_SHIFT_MESSAGE)

    initialize_nozzle_sales(shift)

    logger.info(
        "Shift %s (%s #%s) opened on station %s by %s",
        shift.id, shift_type, shift.sequence, station.id,
        getattr(user, "employee_id", None),
    )

    return shift


# ============================================================
# LOCK / UNLOCK
# ============================================================

@transaction.atomic
def lock_shift(shift_id, user):
    shift = get_shift_for_update(shift_id)

    if shift.locked:
        raise Conflict("Shift is already locked.")

    now = timezone.now()
    shift.status = ShiftStatus.LOCKED
    shift.locked = True
    shift.locked_at = now
    shift.locked_by = user
    shift.end_time = shift.end_time or now
    shift.save(update_fields=[
        "status", "locked", "locked_at", "locked_by", "end_time", "updated_at",
    ])

    logger.info("Shift %s locked by %s", shift.id, user.employee_id)
    return shift


@transaction.atomic
def unlock_shift(shift_id, user):
    """
    Tank levels already moved by the shift stay as they are.
    """
    shift = get_shift_for_update(shift_id)

    if not shift.locked:
        raise Conflict("Shift is not locked.")

    shift.status = ShiftStatus.CLOSED
    shift.locked = False
    shift.unlocked_by = user
    shift.save(update_fields=["status", "locked", "unlocked_by", "updated_at"])

    logger.info("Shift %s unlocked by %s", shift.id, user.employee_id)
    return shift


@transaction.atomic
def delete_shift(shift_id, user):
    shift = get_shift_for_update(shift_id)

    cash_transaction = getattr(shift, "cash_transaction", None)
    if cash_transaction is not None and hasattr(cash_transaction, "transfer"):
        raise Conflict("Cash of this shift is already in custody.")

    shift_pk = shift.pk
    shift.delete()

    logger.warning("Shift %s deleted by %s", shift_pk, user.employee_id)
