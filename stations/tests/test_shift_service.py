import uuid
from decimal import Decimal

from django.utils import timezone
from rest_framework.exceptions import NotFound

from core.exceptions import Conflict
from stations.constants import ShiftStatus, ShiftType
from stations.models_shift import Shift
from stations.services.pricing import set_fuel_price
from stations.services.shift import (
    create_shift,
    get_current_shift,
    lock_shift,
    unlock_shift,
    delete_shift,
)
from stations.tests.base import StationTestCase


class ShiftLifecycleTestCase(StationTestCase):

    def test_create_shift(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)

        self.assertEqual(shift.status, ShiftStatus.OPEN)
        self.assertFalse(shift.locked)
        self.assertEqual(shift.sequence, 1)
        self.assertEqual(get_current_shift(self.station.id), shift)

    def test_shift_start_hours(self):
        day = create_shift(self.station.id, ShiftType.DAY, self.manager)
        lock_shift(day.id, self.manager)
        night = create_shift(self.station.id, ShiftType.NIGHT, self.manager)

        self.assertEqual(timezone.localtime(day.start_time).hour, 0)
        self.assertEqual(timezone.localtime(night.start_time).hour, 12)
        self.assertEqual(night.sequence, 2)

    def test_second_open_shift_is_a_conflict(self):
        create_shift(self.station.id, ShiftType.DAY, self.manager)

        with self.assertRaises(Conflict):
            create_shift(self.station.id, ShiftType.NIGHT, self.manager)

        self.assertEqual(Shift.objects.filter(station=self.station).count(), 1)

    def test_unknown_station(self):
        with self.assertRaises(NotFound):
            create_shift(uuid.uuid4(), ShiftType.DAY, self.manager)

    def test_lock_then_new_shift_allowed(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)
        locked = lock_shift(shift.id, self.manager)

        self.assertEqual(locked.status, ShiftStatus.LOCKED)
        self.assertTrue(locked.locked)
        self.assertEqual(locked.locked_by, self.manager)
        self.assertIsNone(get_current_shift(self.station.id))

        create_shift(self.station.id, ShiftType.NIGHT, self.manager)

    def test_lock_twice_is_a_conflict(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)
        lock_shift(shift.id, self.manager)

        with self.assertRaises(Conflict):
            lock_shift(shift.id, self.manager)

    def test_unlock(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)
        lock_shift(shift.id, self.manager)

        shift = unlock_shift(shift.id, self.admin)

        self.assertEqual(shift.status, ShiftStatus.CLOSED)
        self.assertFalse(shift.locked)
        self.assertEqual(shift.unlocked_by, self.admin)

    def test_unlock_unlocked_shift_is_a_conflict(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)

        with self.assertRaises(Conflict):
            unlock_shift(shift.id, self.admin)

    def test_sales_rows_snapshot_current_prices(self):
        tank_91 = self.make_tank("91")
        tank_diesel = self.make_tank("DIESEL")
        self.make_nozzle(tank_91, "P1-91")
        self.make_nozzle(tank_diesel, "P2-D")
        set_fuel_price(self.station, "91", "2.18", self.admin)

        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)

        prices = {
            sale.nozzle.fuel_type: sale.price_per_liter
            for sale in shift.nozzle_sales.select_related("nozzle")
        }
        self.assertEqual(prices["91"], Decimal("2.18"))
        # No price set: 0
        self.assertEqual(prices["DIESEL"], Decimal("0"))

        # Later price changes do not reach an opened shift
        set_fuel_price(self.station, "91", "2.33", self.admin)
        sale = shift.nozzle_sales.get(nozzle__fuel_type="91")
        self.assertEqual(sale.price_per_liter, Decimal("2.18"))

    def test_delete_shift(self):
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)

        delete_shift(shift.id, self.admin)

        self.assertFalse(Shift.objects.filter(id=shift.id).exists())
