from io import StringIO

from django.core.management import call_command

from stations.models import Station
from stations.models_inventory import Tank, Nozzle
from stations.tests.base import StationTestCase


class InitStationEquipmentTestCase(StationTestCase):

    def test_provisions_only_bare_stations(self):
        equipped = self.make_tank("91")
        self.make_nozzle(equipped, "P1-91")
        bare = Station.objects.create(name="Station Sulay")

        out = StringIO()
        call_command("init_station_equipment", stdout=out)

        self.assertEqual(Tank.objects.filter(station=self.station).count(), 1)
        self.assertEqual(Tank.objects.filter(station=bare).count(), 3)
        self.assertEqual(Nozzle.objects.filter(station=bare).count(), 3)
        self.assertIn("Total tanks created: 3", out.getvalue())

        # Idempotent
        call_command("init_station_equipment", stdout=StringIO())
        self.assertEqual(Tank.objects.filter(station=bare).count(), 3)
