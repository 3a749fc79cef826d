import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


CASH_STATUSES = [
    ("PENDING_ACCEPTANCE", "Pending acceptance"),
    ("WITH_AM", "With area manager"),
    ("DEPOSITED", "Deposited"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("stations", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CashTransaction",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("liters_sold", models.DecimalField(decimal_places=2, max_digits=12)),
                ("rate_per_liter", models.DecimalField(decimal_places=4, max_digits=10)),
                ("total_revenue", models.DecimalField(decimal_places=2, max_digits=14)),
                ("card_payments", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("cash_on_hand", models.DecimalField(decimal_places=2, max_digits=14)),
                ("bank_deposit", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("cash_to_am", models.DecimalField(decimal_places=2, max_digits=14)),
                ("declared_cash", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ("status", models.CharField(choices=CASH_STATUSES, default="PENDING_ACCEPTANCE", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="cash_transactions_created", to=settings.AUTH_USER_MODEL)),
                ("shift", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="cash_transaction", to="stations.shift")),
                ("station", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cash_transactions", to="stations.station")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CashTransfer",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("status", models.CharField(choices=CASH_STATUSES, default="PENDING_ACCEPTANCE", max_length=20)),
                ("receipt_url", models.CharField(blank=True, max_length=500)),
                ("accepted_at", models.DateTimeField(blank=True, null=True)),
                ("deposited_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("cash_transaction", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="transfer", to="cash.cashtransaction")),
                ("from_user", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="cash_transfers_sent", to=settings.AUTH_USER_MODEL)),
                ("to_user", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="cash_transfers_received", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
