# cash/models.py

import uuid
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.db import models
from rest_framework.exceptions import ValidationError

CENTS = Decimal("0.01")


class CashStatus(models.TextChoices):
    PENDING_ACCEPTANCE = "PENDING_ACCEPTANCE", "Pending acceptance"
    WITH_AM = "WITH_AM", "With area manager"
    DEPOSITED = "DEPOSITED", "Deposited"


ALLOWED_TRANSITIONS = {
    CashStatus.PENDING_ACCEPTANCE: [
        CashStatus.WITH_AM,
    ],
    CashStatus.WITH_AM: [
        CashStatus.DEPOSITED,
    ],
    CashStatus.DEPOSITED: [],
}


class CashTransaction(models.Model):
    """
    Money collected during one shift.

    total_revenue = liters_sold × rate_per_liter
    cash_on_hand  = total_revenue − card_payments
    cash_to_am    = cash_on_hand − bank_deposit
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    shift = models.OneToOneField(
        "stations.Shift",
        on_delete=models.CASCADE,
        related_name="cash_transaction"
    )
    station = models.ForeignKey(
        "stations.Station",
        on_delete=models.CASCADE,
        related_name="cash_transactions"
    )

    liters_sold = models.DecimalField(max_digits=12, decimal_places=2)
    rate_per_liter = models.DecimalField(max_digits=10, decimal_places=4)
    total_revenue = models.DecimalField(max_digits=14, decimal_places=2)
    card_payments = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    cash_on_hand = models.DecimalField(max_digits=14, decimal_places=2)
    bank_deposit = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    cash_to_am = models.DecimalField(max_digits=14, decimal_places=2)

    # Cash figure typed by the station manager on the sales sheet
    declared_cash = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )

    status = models.CharField(
        max_length=20,
        choices=CashStatus.choices,
        default=CashStatus.PENDING_ACCEPTANCE
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="cash_transactions_created"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.station} – {self.cash_to_am} ({self.get_status_display()})"

    @staticmethod
    def compute_amounts(
        liters_sold,
        rate_per_liter,
        card_payments=Decimal("0.00"),
        bank_deposit=Decimal("0.00"),
        total_revenue=None,
    ):
        """
        Derived amounts of a transaction. total_revenue may be passed when it
        was summed row by row (sales sheet); otherwise liters × rate.
        """

        liters_sold = Decimal(liters_sold)
        rate_per_liter = Decimal(rate_per_liter)
        card_payments = Decimal(card_payments or 0)
        bank_deposit = Decimal(bank_deposit or 0)

        if liters_sold < 0 or rate_per_liter < 0:
            raise ValidationError("Liters and rate must not be negative.")
        if card_payments < 0 or bank_deposit < 0:
            raise ValidationError("Payments must not be negative.")

        if total_revenue is None:
            total_revenue = liters_sold * rate_per_liter
        total_revenue = Decimal(total_revenue).quantize(CENTS, rounding=ROUND_HALF_UP)

        cash_on_hand = total_revenue - card_payments
        if cash_on_hand < 0:
            raise ValidationError(
                f"Card payments ({card_payments}) exceed total revenue ({total_revenue})."
            )

        cash_to_am = cash_on_hand - bank_deposit
        if cash_to_am < 0:
            raise ValidationError(
                f"Bank deposit ({bank_deposit}) exceeds cash on hand ({cash_on_hand})."
            )

        return {
            "liters_sold": liters_sold,
            "rate_per_liter": rate_per_liter,
            "total_revenue": total_revenue,
            "card_payments": card_payments,
            "cash_on_hand": cash_on_hand,
            "bank_deposit": bank_deposit,
            "cash_to_am": cash_to_am,
        }


class CashTransfer(models.Model):
    """
    Hand-over of a transaction's cash from a station manager to an area
    manager. Its status always mirrors the transaction's.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    cash_transaction = models.OneToOneField(
        CashTransaction,
        on_delete=models.CASCADE,
        related_name="transfer"
    )

    from_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="cash_transfers_sent"
    )
    to_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="cash_transfers_received"
    )

    status = models.CharField(
        max_length=20,
        choices=CashStatus.choices,
        default=CashStatus.PENDING_ACCEPTANCE
    )

    receipt_url = models.CharField(max_length=500, blank=True)
    accepted_at = models.DateTimeField(null=True, blank=True)
    deposited_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.from_user} → {self.to_user} ({self.get_status_display()})"
