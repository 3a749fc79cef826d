# stations/management/commands/init_station_equipment.py

from django.core.management.base import BaseCommand

from stations.models import Station
from stations.services.provisioning import provision_default_equipment


class Command(BaseCommand):
    help = "Creates the default tanks and nozzles (91, 95, DIESEL) for every station without equipment"

    def add_arguments(self, parser):
        parser.add_argument(
            "--station",
            dest="station_id",
            help="Only this station (UUID)",
        )

    def handle(self, *args, **options):
        stations = Station.objects.all()
        if options.get("station_id"):
            stations = stations.filter(id=options["station_id"])

        total_created = 0

        for station in stations:
            tanks = provision_default_equipment(station)
            if tanks:
                total_created += len(tanks)
                self.stdout.write(
                    self.style.SUCCESS(
                        f"{len(tanks)} tanks created for {station.name}"
                    )
                )

        self.stdout.write(
            self.style.WARNING(
                f"Total tanks created: {total_created}"
            )
        )
