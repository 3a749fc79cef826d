# stations/services/pricing.py

import logging
from decimal import Decimal

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from stations.models_pricing import FuelPrice

logger = logging.getLogger(__name__)


def get_current_prices(station, at=None):
    """
    Active price per fuel type for a station: latest effective_from
    not after `at` (now by default).

    Returns {fuel_type: FuelPrice}.
    """

    at = at or timezone.now()

    prices = (
        FuelPrice.objects
        .filter(station=station, effective_from__lte=at)
        .order_by("-effective_from", "-created_at")
    )

    latest = {}
    for price in prices:
        latest.setdefault(price.fuel_type, price)

    return latest


def get_current_price(station, fuel_type, at=None):
    at = at or timezone.now()

    return (
        FuelPrice.objects
        .filter(
            station=station,
            fuel_type=fuel_type,
            effective_from__lte=at,
        )
        .order_by("-effective_from", "-created_at")
        .first()
    )


def set_fuel_price(station, fuel_type, price_per_liter, user, effective_from=None):
    price_per_liter = Decimal(price_per_liter)

    if price_per_liter <= 0:
        raise ValidationError(
            {"price_per_liter": "Price per liter must be positive."}
        )

    price = FuelPrice.objects.create(
        station=station,
        fuel_type=fuel_type,
        price_per_liter=price_per_liter,
        effective_from=effective_from or timezone.now(),
        created_by=user,
    )

    logger.info(
        "Price %s set for %s on station %s from %s",
        price.price_per_liter, fuel_type, station.id, price.effective_from,
    )

    return price
