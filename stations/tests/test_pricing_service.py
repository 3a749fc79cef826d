from datetime import timedelta
from decimal import Decimal

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from stations.services.pricing import (
    get_current_price,
    get_current_prices,
    set_fuel_price,
)
from stations.tests.base import StationTestCase


class FuelPriceTestCase(StationTestCase):

    def test_latest_effective_price_wins(self):
        now = timezone.now()
        set_fuel_price(self.station, "95", "2.10", self.admin, effective_from=now - timedelta(days=30))
        set_fuel_price(self.station, "95", "2.33", self.admin, effective_from=now - timedelta(days=1))

        price = get_current_price(self.station, "95")
        self.assertEqual(price.price_per_liter, Decimal("2.33"))

    def test_future_price_is_not_active_yet(self):
        now = timezone.now()
        set_fuel_price(self.station, "95", "2.33", self.admin, effective_from=now - timedelta(hours=1))
        set_fuel_price(self.station, "95", "2.50", self.admin, effective_from=now + timedelta(days=1))

        self.assertEqual(
            get_current_price(self.station, "95").price_per_liter,
            Decimal("2.33"),
        )

    def test_prices_per_fuel_type(self):
        set_fuel_price(self.station, "91", "2.18", self.admin)
        set_fuel_price(self.station, "DIESEL", "1.66", self.admin)

        prices = get_current_prices(self.station)

        self.assertEqual(set(prices), {"91", "DIESEL"})
        self.assertEqual(prices["DIESEL"].price_per_liter, Decimal("1.66"))

    def test_no_price(self):
        self.assertIsNone(get_current_price(self.station, "91"))

    def test_price_must_be_positive(self):
        with self.assertRaises(ValidationError):
            set_fuel_price(self.station, "91", "0", self.admin)
