from decimal import Decimal

from rest_framework.exceptions import ValidationError

from core.exceptions import Conflict
from stations.constants import ShiftType
from stations.models import Station
from stations.models_shift import NozzleReading
from stations.services.reconciliation import (
    submit_shift_readings,
    update_shift_reading,
    resolve_opening_reading,
)
from stations.services.shift import create_shift, lock_shift
from stations.tests.base import StationTestCase


class ShiftReadingsTestCase(StationTestCase):

    def setUp(self):
        super().setUp()
        self.tank = self.make_tank("95", capacity="20000", level="1000")
        self.nozzle_a = self.make_nozzle(self.tank, "P1-95-A")
        self.nozzle_b = self.make_nozzle(self.tank, "P1-95-B")

    def open_shift(self):
        return create_shift(self.station.id, ShiftType.DAY, self.manager)

    def submit(self, shift, *pairs):
        return submit_shift_readings(
            shift.id,
            self.station.id,
            [
                {"nozzle_id": nozzle.id, "closing_reading": Decimal(closing)}
                for nozzle, closing in pairs
            ],
        )

    def close_previous_shift(self, closings):
        shift = self.open_shift()
        self.submit(shift, *closings)
        lock_shift(shift.id, self.manager)
        return shift

    # ----------------------------------------------------------
    # Opening readings
    # ----------------------------------------------------------

    def test_first_shift_opens_at_zero(self):
        shift = self.open_shift()

        self.assertEqual(resolve_opening_reading(shift, self.nozzle_a), Decimal("0"))

        readings = self.submit(shift, (self.nozzle_a, "40"))
        self.assertEqual(readings[0].opening_reading, Decimal("0"))
        self.assertEqual(readings[0].consumption, Decimal("40"))

    def test_opening_is_previous_closing(self):
        self.close_previous_shift([(self.nozzle_a, "120"), (self.nozzle_b, "80")])
        shift = self.open_shift()

        self.assertEqual(resolve_opening_reading(shift, self.nozzle_a), Decimal("120"))
        self.assertEqual(resolve_opening_reading(shift, self.nozzle_b), Decimal("80"))

    def test_opening_comes_from_latest_shift_with_a_reading(self):
        self.close_previous_shift([(self.nozzle_a, "120")])
        self.close_previous_shift([(self.nozzle_b, "30")])
        shift = self.open_shift()

        self.assertEqual(resolve_opening_reading(shift, self.nozzle_a), Decimal("120"))
        self.assertEqual(resolve_opening_reading(shift, self.nozzle_b), Decimal("30"))

    # ----------------------------------------------------------
    # Consumption and tank levels
    # ----------------------------------------------------------

    def test_closing_below_opening_rejects_the_batch(self):
        self.close_previous_shift([(self.nozzle_a, "120")])
        level_before = self.level_of(self.tank)
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            self.submit(shift, (self.nozzle_b, "50"), (self.nozzle_a, "95"))

        self.assertFalse(NozzleReading.objects.filter(shift=shift).exists())
        self.assertEqual(self.level_of(self.tank), level_before)

    def test_two_nozzles_on_one_tank(self):
        self.close_previous_shift([(self.nozzle_a, "100"), (self.nozzle_b, "200")])
        self.assertEqual(self.level_of(self.tank), Decimal("700"))

        shift = self.open_shift()
        readings = self.submit(shift, (self.nozzle_a, "150"), (self.nozzle_b, "260"))

        consumption = {r.nozzle_id: r.consumption for r in readings}
        self.assertEqual(consumption[self.nozzle_a.id], Decimal("50"))
        self.assertEqual(consumption[self.nozzle_b.id], Decimal("60"))
        self.assertEqual(self.level_of(self.tank), Decimal("590"))

    def test_resubmission_applies_only_the_difference(self):
        shift = self.open_shift()

        self.submit(shift, (self.nozzle_a, "100"))
        self.assertEqual(self.level_of(self.tank), Decimal("900"))

        self.submit(shift, (self.nozzle_a, "100"))
        self.assertEqual(self.level_of(self.tank), Decimal("900"))

        self.submit(shift, (self.nozzle_a, "130"))
        self.assertEqual(self.level_of(self.tank), Decimal("870"))

        self.submit(shift, (self.nozzle_a, "90"))
        self.assertEqual(self.level_of(self.tank), Decimal("910"))

        self.assertEqual(
            NozzleReading.objects.filter(shift=shift, nozzle=self.nozzle_a).count(),
            1,
        )

    def test_tank_never_goes_negative(self):
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            self.submit(shift, (self.nozzle_a, "600"), (self.nozzle_b, "600"))

        self.assertEqual(self.level_of(self.tank), Decimal("1000"))
        self.assertFalse(NozzleReading.objects.filter(shift=shift).exists())

    def test_one_tank_per_nozzle(self):
        diesel = self.make_tank("DIESEL", level="300")
        nozzle_d = self.make_nozzle(diesel, "P2-D")
        shift = self.open_shift()

        self.submit(shift, (self.nozzle_a, "10"), (nozzle_d, "25"))

        self.assertEqual(self.level_of(self.tank), Decimal("990"))
        self.assertEqual(self.level_of(diesel), Decimal("275"))

    # ----------------------------------------------------------
    # Rejections
    # ----------------------------------------------------------

    def test_locked_shift_is_a_conflict(self):
        shift = self.open_shift()
        lock_shift(shift.id, self.manager)

        with self.assertRaises(Conflict):
            self.submit(shift, (self.nozzle_a, "10"))

    def test_duplicate_nozzle_in_batch(self):
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            self.submit(shift, (self.nozzle_a, "10"), (self.nozzle_a, "20"))

    def test_nozzle_of_another_station(self):
        other = Station.objects.create(name="Station Malaz")
        foreign_nozzle = self.make_nozzle(
            self.make_tank("95", station=other), "M1-95"
        )
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            self.submit(shift, (foreign_nozzle, "10"))

    def test_shift_of_another_station(self):
        other = Station.objects.create(name="Station Malaz")
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            submit_shift_readings(
                shift.id, other.id,
                [{"nozzle_id": self.nozzle_a.id, "closing_reading": Decimal("10")}],
            )

    def test_empty_batch(self):
        shift = self.open_shift()

        with self.assertRaises(ValidationError):
            submit_shift_readings(shift.id, self.station.id, [])

    # ----------------------------------------------------------
    # Single reading correction
    # ----------------------------------------------------------

    def test_update_single_reading(self):
        shift = self.open_shift()
        reading = self.submit(shift, (self.nozzle_a, "100"))[0]

        reading = update_shift_reading(shift.id, reading.id, Decimal("70"))

        self.assertEqual(reading.consumption, Decimal("70"))
        self.assertEqual(self.level_of(self.tank), Decimal("930"))

    def test_update_single_reading_below_opening(self):
        self.close_previous_shift([(self.nozzle_a, "120")])
        shift = self.open_shift()
        reading = self.submit(shift, (self.nozzle_a, "150"))[0]

        with self.assertRaises(ValidationError):
            update_shift_reading(shift.id, reading.id, Decimal("100"))

        reading.refresh_from_db()
        self.assertEqual(reading.closing_reading, Decimal("150"))
