import uuid
from decimal import Decimal

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


FUEL_TYPES = [("91", "91 octane"), ("95", "95 octane"), ("DIESEL", "Diesel")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Station",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("address", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("area_manager", models.ForeignKey(blank=True, limit_choices_to={"role": "AM"}, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="managed_stations", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Tank",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("fuel_type", models.CharField(choices=FUEL_TYPES, max_length=10)),
                ("capacity", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("current_level", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("station", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tanks", to="stations.station")),
            ],
            options={
                "ordering": ["station", "fuel_type"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("current_level__gte", 0)), name="tank_level_not_negative"),
                    models.CheckConstraint(condition=models.Q(("capacity__isnull", True), ("current_level__lte", models.F("capacity")), _connector="OR"), name="tank_level_within_capacity"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Nozzle",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("fuel_type", models.CharField(choices=FUEL_TYPES, max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("station", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="nozzles", to="stations.station")),
                ("tank", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="nozzles", to="stations.tank")),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="TankerDelivery",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("liters_delivered", models.DecimalField(decimal_places=2, max_digits=12)),
                ("delivery_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("ticket_number", models.CharField(blank=True, max_length=100)),
                ("notes", models.TextField(blank=True)),
                ("level_after", models.DecimalField(decimal_places=2, max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recorded_by", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="tanker_deliveries", to=settings.AUTH_USER_MODEL)),
                ("tank", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="deliveries", to="stations.tank")),
            ],
            options={
                "verbose_name": "Tanker delivery",
                "verbose_name_plural": "Tanker deliveries",
                "ordering": ["-delivery_date"],
            },
        ),
        migrations.CreateModel(
            name="Shift",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("sequence", models.PositiveIntegerField(default=0, editable=False)),
                ("shift_type", models.CharField(choices=[("DAY", "Day"), ("NIGHT", "Night")], max_length=10)),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField(blank=True, null=True)),
                ("status", models.CharField(choices=[("OPEN", "Open"), ("CLOSED", "Closed"), ("LOCKED", "Locked")], default="OPEN", max_length=10)),
                ("locked", models.BooleanField(default=False)),
                ("locked_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("locked_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="shifts_locked", to=settings.AUTH_USER_MODEL)),
                ("station", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="shifts", to="stations.station")),
                ("unlocked_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="shifts_unlocked", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-sequence"],
                "indexes": [models.Index(fields=["station", "sequence"], name="shift_station_seq_idx")],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("status", "OPEN"), ("locked", False)), fields=("station",), name="unique_open_shift_per_station"),
                ],
            },
        ),
        migrations.CreateModel(
            name="NozzleReading",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("opening_reading", models.DecimalField(decimal_places=2, max_digits=14)),
                ("closing_reading", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ("consumption", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("nozzle", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="readings", to="stations.nozzle")),
                ("shift", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="readings", to="stations.shift")),
            ],
            options={
                "ordering": ["nozzle__name"],
                "constraints": [
                    models.UniqueConstraint(fields=("shift", "nozzle"), name="unique_reading_per_shift_nozzle"),
                    models.CheckConstraint(condition=models.Q(("consumption__isnull", True), ("consumption__gte", 0), _connector="OR"), name="reading_consumption_not_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="NozzleSale",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("quantity_liters", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("price_per_liter", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("card_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("cash_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("nozzle", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sales", to="stations.nozzle")),
                ("shift", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="nozzle_sales", to="stations.shift")),
            ],
            options={
                "ordering": ["nozzle__name"],
                "constraints": [
                    models.UniqueConstraint(fields=("shift", "nozzle"), name="unique_sale_per_shift_nozzle"),
                ],
            },
        ),
        migrations.CreateModel(
            name="FuelPrice",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("fuel_type", models.CharField(choices=FUEL_TYPES, max_length=10)),
                ("price_per_liter", models.DecimalField(decimal_places=2, max_digits=10)),
                ("effective_from", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="fuel_prices_created", to=settings.AUTH_USER_MODEL)),
                ("station", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="fuel_prices", to="stations.station")),
            ],
            options={
                "ordering": ["-effective_from", "-created_at"],
                "indexes": [models.Index(fields=["station", "fuel_type", "-effective_from"], name="fuelprice_lookup_idx")],
            },
        ),
    ]
