# stations/services/sales.py

import logging
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import ValidationError, NotFound

from cash.services.custody import CashCustody
from core.exceptions import Conflict
from stations.constants import ShiftStatus
from stations.models_inventory import Tank
from stations.models_shift import NozzleSale
from stations.services.pricing import get_current_prices
from stations.services.provisioning import provision_default_equipment
from stations.services.reconciliation import as_decimal
from stations.services.shift import get_shift_for_update

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")
RATE_PLACES = Decimal("0.0001")


# ============================================================
# INITIALIZATION
# ============================================================

def initialize_nozzle_sales(shift):
    """
    One sale row per station nozzle, priced with the current station price
    (0 when no price is set). Existing rows are left untouched.
    """

    prices = get_current_prices(shift.station)
    existing = set(shift.nozzle_sales.values_list("nozzle_id", flat=True))

    rows = []
    for nozzle in shift.station.nozzles.all():
        if nozzle.id in existing:
            continue
        price = prices.get(nozzle.fuel_type)
        rows.append(NozzleSale(
            shift=shift,
            nozzle=nozzle,
            price_per_liter=price.price_per_liter if price else ZERO,
        ))

    if rows:
        NozzleSale.objects.bulk_create(rows)

    return rows


def _bootstrap_sales(shift):
    provision_default_equipment(shift.station)
    initialize_nozzle_sales(shift)


def list_shift_sales(shift_id):
    return (
        NozzleSale.objects
        .filter(shift_id=shift_id)
        .select_related("nozzle", "nozzle__tank")
    )


# ============================================================
# EDITS
# ============================================================

@transaction.atomic
def update_nozzle_sale(sale_id, quantity_liters=None, card_amount=None, cash_amount=None):
    """
    Updates one row. Card and cash amounts belong to the shift and are
    written on every row of it.
    """

    # Shift before sale row, the order submission locks them in.
    shift_id = (
        NozzleSale.objects
        .filter(id=sale_id)
        .values_list("shift_id", flat=True)
        .first()
    )
    if shift_id is None:
        raise NotFound("Sale not found.")

    shift = get_shift_for_update(shift_id)
    if shift.locked:
        raise Conflict("Shift is locked.")

    sale = NozzleSale.objects.select_for_update().filter(id=sale_id).first()
    if sale is None:
        raise NotFound("Sale not found.")

    if quantity_liters is not None:
        quantity_liters = as_decimal(quantity_liters, "quantity_liters")
        if quantity_liters < 0:
            raise ValidationError({"quantity_liters": "Must not be negative."})
        sale.quantity_liters = quantity_liters
        sale.save(update_fields=["quantity_liters", "updated_at"])

    payments = {}
    if card_amount is not None:
        payments["card_amount"] = card_amount
    if cash_amount is not None:
        payments["cash_amount"] = cash_amount

    if payments:
        _replicate_payments(shift, **payments)
        sale.refresh_from_db()

    return sale


def _replicate_payments(shift, **payments):
    for field, value in payments.items():
        payments[field] = as_decimal(value, field)
        if payments[field] < 0:
            raise ValidationError({field: "Must not be negative."})

    NozzleSale.objects.filter(shift=shift).update(
        updated_at=timezone.now(),
        **payments,
    )


@transaction.atomic
def update_shift_payments(shift_id, card_amount, cash_amount):
    shift = get_shift_for_update(shift_id)
    if shift.locked:
        raise Conflict("Shift is locked.")

    _bootstrap_sales(shift)
    _replicate_payments(shift, card_amount=card_amount, cash_amount=cash_amount)

    return list_shift_sales(shift.id)


# ============================================================
# SUBMISSION → TANKS, SHIFT CLOSED, CASH IN CUSTODY
# ============================================================

@transaction.atomic
def submit_nozzle_sales(shift_id, user):
    """
    Closes a shift from its nozzle sales.

    Takes the sold litres out of the tanks, closes and locks the shift,
    opens the cash transaction and, when the user has an area manager,
    hands the cash over to them. Everything happens or nothing does.
    """

    shift = get_shift_for_update(shift_id)
    if shift.locked:
        raise Conflict("Shift is already locked.")

    _bootstrap_sales(shift)

    sales = list(
        NozzleSale.objects
        .select_for_update()
        .filter(shift=shift)
        .select_related("nozzle")
    )
    if not sales:
        raise ValidationError("No sales data found for this shift.")

    per_tank = defaultdict(Decimal)
    for sale in sales:
        if sale.quantity_liters < 0:
            raise ValidationError(
                f"Negative quantity on nozzle {sale.nozzle.name}."
            )
        per_tank[sale.nozzle.tank_id] += sale.quantity_liters

    tanks = {
        tank.id: tank
        for tank in (
            Tank.objects
            .select_for_update()
            .filter(id__in=per_tank.keys())
            .order_by("id")
        )
    }

    for tank_id, liters in per_tank.items():
        tank = tanks[tank_id]
        if tank.current_level < liters:
            raise ValidationError(
                f"Insufficient fuel in {tank.get_fuel_type_display()} tank. "
                f"Current: {tank.current_level}L, Needed: {liters}L"
            )

    now = timezone.now()
    for tank_id, liters in per_tank.items():
        if liters > 0:
            Tank.objects.filter(id=tank_id).update(
                current_level=F("current_level") - liters,
                updated_at=now,
            )

    total_liters = sum((s.quantity_liters for s in sales), ZERO)
    total_revenue = sum((s.quantity_liters * s.price_per_liter for s in sales), ZERO)
    total_revenue = total_revenue.quantize(ZERO, rounding=ROUND_HALF_UP)

    # Shift-level amounts, identical on every row.
    card_payments = sales[0].card_amount
    declared_cash = sales[0].cash_amount

    rate = (
        (total_revenue / total_liters).quantize(RATE_PLACES, rounding=ROUND_HALF_UP)
        if total_liters > 0 else ZERO
    )

    shift.status = ShiftStatus.CLOSED
    shift.locked = True
    shift.locked_at = now
    shift.locked_by = user
    shift.end_time = now
    shift.save(update_fields=[
        "status", "locked", "locked_at", "locked_by", "end_time", "updated_at",
    ])

    custody = CashCustody.open_for_shift(
        shift,
        liters_sold=total_liters,
        rate_per_liter=rate,
        total_revenue=total_revenue,
        card_payments=card_payments,
        declared_cash=declared_cash,
        created_by=user,
    )

    area_manager = user.resolve_area_manager()
    if area_manager is not None:
        custody.initiate_transfer(user, to_user=area_manager)

    logger.info(
        "Sales submitted for shift %s: %sL, revenue %s, card %s",
        shift.id, total_liters, total_revenue, card_payments,
    )

    return {
        "shift": shift,
        "sales": sales,
        "cash_transaction": custody.transaction,
        "transfer": custody.transfer,
    }
