import uuid
from decimal import Decimal

from rest_framework.exceptions import ValidationError, NotFound

from stations.models import Station
from stations.models_inventory import TankerDelivery
from stations.services.delivery import record_tanker_delivery
from stations.tests.base import StationTestCase


class TankerDeliveryTestCase(StationTestCase):

    def setUp(self):
        super().setUp()
        self.tank = self.make_tank(capacity="10000", level="9500")

    def test_delivery_over_capacity_is_rejected(self):
        with self.assertRaises(ValidationError):
            record_tanker_delivery(self.tank.id, "700", self.manager)

        self.assertEqual(self.level_of(self.tank), Decimal("9500"))
        self.assertFalse(TankerDelivery.objects.exists())

    def test_delivery_within_capacity_raises_level(self):
        delivery, tank = record_tanker_delivery(
            self.tank.id,
            "400",
            self.manager,
            ticket_number="ARM-7781",
        )

        self.assertEqual(tank.current_level, Decimal("9900"))
        self.assertEqual(self.level_of(self.tank), Decimal("9900"))
        self.assertEqual(delivery.level_after, Decimal("9900"))
        self.assertEqual(delivery.ticket_number, "ARM-7781")
        self.assertEqual(delivery.recorded_by, self.manager)

    def test_delivery_up_to_exact_capacity_is_accepted(self):
        _, tank = record_tanker_delivery(self.tank.id, "500", self.manager)
        self.assertEqual(tank.current_level, Decimal("10000"))

    def test_tank_without_capacity_has_no_upper_bound(self):
        tank = self.make_tank(fuel_type="DIESEL", capacity=None, level="0")

        _, tank = record_tanker_delivery(tank.id, "250000", self.manager)
        self.assertEqual(tank.current_level, Decimal("250000"))

    def test_non_positive_volume_is_rejected(self):
        for liters in ("0", "-10"):
            with self.assertRaises(ValidationError):
                record_tanker_delivery(self.tank.id, liters, self.manager)

        self.assertEqual(self.level_of(self.tank), Decimal("9500"))

    def test_unknown_tank(self):
        with self.assertRaises(NotFound):
            record_tanker_delivery(uuid.uuid4(), "100", self.manager)

    def test_tank_of_another_station_is_rejected(self):
        other = Station.objects.create(name="Station Malaz")

        with self.assertRaises(ValidationError):
            record_tanker_delivery(
                self.tank.id, "100", self.manager, station_id=other.id
            )
