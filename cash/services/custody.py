# cash/services/custody.py

import logging

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import ValidationError, NotFound, PermissionDenied

from accounts.constants import UserRole
from cash.models import (
    CashTransaction,
    CashTransfer,
    CashStatus,
    ALLOWED_TRANSITIONS,
)
from core.exceptions import Conflict
from core.storage import store_receipt, discard_receipt

logger = logging.getLogger(__name__)


class CashCustody:
    """
    A cash transaction together with its transfer.

    Every status change goes through here, so both rows always carry the
    same status. Callers hold a transaction.atomic block; rows loaded with
    `load()` are locked until it ends.
    """

    def __init__(self, cash_transaction, transfer=None):
        self.transaction = cash_transaction
        self.transfer = transfer

    # --------------------------------------------------------
    # Loading / creation
    # --------------------------------------------------------

    @classmethod
    def load(cls, transaction_id, for_update=True):
        transactions = CashTransaction.objects.select_related("station", "shift")
        transfers = CashTransfer.objects.all()

        if for_update:
            transactions = transactions.select_for_update(of=("self",))
            transfers = transfers.select_for_update()

        cash_transaction = transactions.filter(id=transaction_id).first()
        if cash_transaction is None:
            raise NotFound("Transaction not found.")

        transfer = transfers.filter(cash_transaction=cash_transaction).first()
        return cls(cash_transaction, transfer)

    @classmethod
    def open_for_shift(
        cls,
        shift,
        *,
        liters_sold,
        rate_per_liter,
        created_by,
        card_payments=0,
        bank_deposit=0,
        total_revenue=None,
        declared_cash=None,
    ):
        if CashTransaction.objects.filter(shift=shift).exists():
            raise Conflict("A cash transaction already exists for this shift.")

        amounts = CashTransaction.compute_amounts(
            liters_sold,
            rate_per_liter,
            card_payments=card_payments,
            bank_deposit=bank_deposit,
            total_revenue=total_revenue,
        )

        cash_transaction = CashTransaction.objects.create(
            shift=shift,
            station_id=shift.station_id,
            declared_cash=declared_cash,
            status=CashStatus.PENDING_ACCEPTANCE,
            created_by=created_by,
            **amounts,
        )

        logger.info(
            "Cash transaction %s opened for shift %s: %s to area manager",
            cash_transaction.id, shift.id, cash_transaction.cash_to_am,
        )

        return cls(cash_transaction)

    @property
    def status(self):
        return self.transaction.status

    # --------------------------------------------------------
    # Transitions
    # --------------------------------------------------------

    def _transition(self, new_status, **transfer_fields):
        if new_status not in ALLOWED_TRANSITIONS.get(self.transaction.status, []):
            raise Conflict(
                f"Transition not allowed: {self.transaction.status} → {new_status}"
            )

        for field, value in transfer_fields.items():
            setattr(self.transfer, field, value)
        self.transfer.status = new_status
        self.transfer.save(
            update_fields=["status", "updated_at", *transfer_fields.keys()]
        )

        self.transaction.status = new_status
        self.transaction.save(update_fields=["status", "updated_at"])

    def _ensure_receiver(self, user, action):
        if self.transfer is None:
            raise Conflict("No transfer has been initiated for this transaction.")

        if self.transfer.to_user_id != user.id:
            raise PermissionDenied(
                f"Only the receiving area manager can {action} this cash."
            )

    def initiate_transfer(self, user, to_user=None):
        if self.transfer is not None:
            raise Conflict("Transfer already initiated.")

        if self.transaction.status != CashStatus.PENDING_ACCEPTANCE:
            raise Conflict("Transaction already processed.")

        if not user.is_admin_role and user.station_id != self.transaction.station_id:
            raise PermissionDenied("This transaction belongs to another station.")

        to_user = to_user or user.resolve_area_manager()
        if to_user is None:
            raise ValidationError("No area manager is assigned to receive this cash.")

        if to_user.role != UserRole.AREA_MANAGER:
            raise ValidationError("Cash can only be transferred to an area manager.")

        self.transfer = CashTransfer.objects.create(
            cash_transaction=self.transaction,
            from_user=user,
            to_user=to_user,
            status=CashStatus.PENDING_ACCEPTANCE,
        )

        logger.info(
            "Transfer %s initiated: %s → %s (%s)",
            self.transfer.id, user.employee_id, to_user.employee_id,
            self.transaction.cash_to_am,
        )

        return self.transfer

    def ensure_can_accept(self, user):
        self._ensure_receiver(user, "accept")

        if self.transaction.status != CashStatus.PENDING_ACCEPTANCE:
            raise Conflict("Transfer already processed.")

    def accept(self, user):
        self.ensure_can_accept(user)
        self._transition(CashStatus.WITH_AM, accepted_at=timezone.now())

        logger.info("Transfer %s accepted by %s", self.transfer.id, user.employee_id)

    def ensure_can_deposit(self, user):
        self._ensure_receiver(user, "deposit")

        if self.transaction.status != CashStatus.WITH_AM:
            raise Conflict("Cash must be accepted before deposit.")

    def deposit(self, user, receipt_url):
        self.ensure_can_deposit(user)

        if not receipt_url:
            raise ValidationError({"receipt": "A deposit receipt is required."})

        self._transition(
            CashStatus.DEPOSITED,
            receipt_url=receipt_url,
            deposited_at=timezone.now(),
        )

        logger.info("Transfer %s deposited by %s", self.transfer.id, user.employee_id)


# ============================================================
# ENTRY POINTS
# ============================================================

@transaction.atomic
def create_cash_transaction(shift_id, user, liters_sold, rate_per_liter,
                            card_payments=0, bank_deposit=0):
    """
    Manual entry of a shift's cash (without the sales sheet).
    """

    from stations.models_shift import Shift

    shift = (
        Shift.objects
        .select_for_update()
        .filter(id=shift_id)
        .first()
    )
    if shift is None:
        raise NotFound("Shift not found.")

    if not user.is_admin_role and user.station_id != shift.station_id:
        raise PermissionDenied("This shift belongs to another station.")

    custody = CashCustody.open_for_shift(
        shift,
        liters_sold=liters_sold,
        rate_per_liter=rate_per_liter,
        card_payments=card_payments,
        bank_deposit=bank_deposit,
        created_by=user,
    )
    return custody.transaction


@transaction.atomic
def initiate_transfer(transaction_id, user):
    custody = CashCustody.load(transaction_id)
    custody.initiate_transfer(user)
    return custody


@transaction.atomic
def accept_cash(transaction_id, user):
    custody = CashCustody.load(transaction_id)
    custody.accept(user)
    return custody


def deposit_cash(transaction_id, user, receipt_file=None, receipt_url=None):
    """
    The uploaded receipt is stored only once the deposit is known to be
    allowed, and outside the database transaction.
    """

    CashCustody.load(transaction_id, for_update=False).ensure_can_deposit(user)

    stored_name = None
    if receipt_file is not None:
        stored_name, receipt_url = store_receipt(receipt_file)

    try:
        with transaction.atomic():
            custody = CashCustody.load(transaction_id)
            custody.deposit(user, receipt_url)
    except Exception:
        # Nothing references the receipt once the deposit is rolled back.
        if stored_name is not None:
            logger.warning("Discarding receipt %s of rejected deposit", stored_name)
            discard_receipt(stored_name)
        raise

    return custody
