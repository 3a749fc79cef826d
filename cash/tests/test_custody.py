from decimal import Decimal
from unittest.mock import patch

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.exceptions import ValidationError, PermissionDenied

from accounts.constants import UserRole
from accounts.models import User
from cash.models import CashTransaction, CashTransfer, CashStatus
from cash.services import custody as custody_service
from cash.services.custody import (
    CashCustody,
    create_cash_transaction,
    initiate_transfer,
    accept_cash,
    deposit_cash,
)
from core.exceptions import Conflict
from stations.constants import ShiftType
from stations.models import Station
from stations.services.shift import create_shift, lock_shift
from stations.tests.base import StationTestCase


class CashTransactionTestCase(StationTestCase):

    def setUp(self):
        super().setUp()
        self.shift = create_shift(self.station.id, ShiftType.DAY, self.manager)

    def test_amounts(self):
        txn = create_cash_transaction(
            self.shift.id,
            self.manager,
            liters_sold=Decimal("1000"),
            rate_per_liter=Decimal("2.18"),
            card_payments=Decimal("800"),
            bank_deposit=Decimal("300"),
        )

        self.assertEqual(txn.total_revenue, Decimal("2180.00"))
        self.assertEqual(txn.cash_on_hand, Decimal("1380.00"))
        self.assertEqual(txn.cash_to_am, Decimal("1080.00"))
        self.assertEqual(txn.status, CashStatus.PENDING_ACCEPTANCE)
        self.assertEqual(txn.station, self.station)

    def test_one_transaction_per_shift(self):
        create_cash_transaction(self.shift.id, self.manager, Decimal("10"), Decimal("2"))

        with self.assertRaises(Conflict):
            create_cash_transaction(self.shift.id, self.manager, Decimal("10"), Decimal("2"))

        self.assertEqual(CashTransaction.objects.count(), 1)

    def test_bank_deposit_above_cash_on_hand(self):
        with self.assertRaises(ValidationError):
            create_cash_transaction(
                self.shift.id, self.manager,
                liters_sold=Decimal("10"),
                rate_per_liter=Decimal("2"),
                bank_deposit=Decimal("21"),
            )

    def test_other_station_manager_is_refused(self):
        other = Station.objects.create(name="Station Malaz")
        intruder = User.objects.create_user(
            username="sm002", password="x", employee_id="SM002", station=other,
        )

        with self.assertRaises(PermissionDenied):
            create_cash_transaction(self.shift.id, intruder, Decimal("10"), Decimal("2"))


class CashCustodyTestCase(StationTestCase):

    def setUp(self):
        super().setUp()
        shift = create_shift(self.station.id, ShiftType.DAY, self.manager)
        lock_shift(shift.id, self.manager)
        self.txn = create_cash_transaction(
            shift.id, self.manager, Decimal("100"), Decimal("2.50"),
        )
        self.other_am = User.objects.create_user(
            username="am002",
            password="x",
            employee_id="AM002",
            role=UserRole.AREA_MANAGER,
        )

    def statuses(self):
        self.txn.refresh_from_db()
        transfer = CashTransfer.objects.filter(cash_transaction=self.txn).first()
        return self.txn.status, transfer.status if transfer else None

    def test_full_custody_chain(self):
        custody = initiate_transfer(self.txn.id, self.manager)
        self.assertEqual(custody.transfer.to_user, self.area_manager)
        self.assertEqual(self.statuses(), (CashStatus.PENDING_ACCEPTANCE,) * 2)

        accept_cash(self.txn.id, self.area_manager)
        self.assertEqual(self.statuses(), (CashStatus.WITH_AM,) * 2)

        custody = deposit_cash(
            self.txn.id, self.area_manager, receipt_url="https://bank.example/r/1"
        )
        self.assertEqual(self.statuses(), (CashStatus.DEPOSITED,) * 2)
        self.assertEqual(custody.transfer.receipt_url, "https://bank.example/r/1")
        self.assertIsNotNone(custody.transfer.accepted_at)
        self.assertIsNotNone(custody.transfer.deposited_at)

    def test_personal_area_manager_comes_first(self):
        self.manager.area_manager = self.other_am
        self.manager.save()

        custody = initiate_transfer(self.txn.id, self.manager)

        self.assertEqual(custody.transfer.to_user, self.other_am)

    def test_transfer_without_area_manager(self):
        self.station.area_manager = None
        self.station.save()
        self.manager.refresh_from_db()

        with self.assertRaises(ValidationError):
            initiate_transfer(self.txn.id, self.manager)

        self.assertFalse(CashTransfer.objects.exists())

    def test_transfer_twice_is_a_conflict(self):
        initiate_transfer(self.txn.id, self.manager)

        with self.assertRaises(Conflict):
            initiate_transfer(self.txn.id, self.manager)

    def test_only_receiver_accepts(self):
        initiate_transfer(self.txn.id, self.manager)

        with self.assertRaises(PermissionDenied):
            accept_cash(self.txn.id, self.other_am)

        self.assertEqual(self.statuses(), (CashStatus.PENDING_ACCEPTANCE,) * 2)

    def test_accept_twice_is_a_conflict(self):
        initiate_transfer(self.txn.id, self.manager)
        accept_cash(self.txn.id, self.area_manager)

        with self.assertRaises(Conflict):
            accept_cash(self.txn.id, self.area_manager)

    def test_accept_without_transfer_is_a_conflict(self):
        with self.assertRaises(Conflict):
            accept_cash(self.txn.id, self.area_manager)

    def test_deposit_before_accept_is_a_conflict(self):
        initiate_transfer(self.txn.id, self.manager)

        with self.assertRaises(Conflict):
            deposit_cash(self.txn.id, self.area_manager, receipt_url="r.pdf")

        self.assertEqual(self.statuses(), (CashStatus.PENDING_ACCEPTANCE,) * 2)

    def test_deposit_requires_receipt(self):
        initiate_transfer(self.txn.id, self.manager)
        accept_cash(self.txn.id, self.area_manager)

        with self.assertRaises(ValidationError):
            deposit_cash(self.txn.id, self.area_manager, receipt_url="")

        self.assertEqual(self.statuses(), (CashStatus.WITH_AM,) * 2)

    def test_only_receiver_deposits(self):
        initiate_transfer(self.txn.id, self.manager)
        accept_cash(self.txn.id, self.area_manager)

        with self.assertRaises(PermissionDenied):
            deposit_cash(self.txn.id, self.other_am, receipt_url="r.pdf")

    def test_deposited_is_terminal(self):
        initiate_transfer(self.txn.id, self.manager)
        accept_cash(self.txn.id, self.area_manager)
        deposit_cash(self.txn.id, self.area_manager, receipt_url="r.pdf")

        with self.assertRaises(Conflict):
            deposit_cash(self.txn.id, self.area_manager, receipt_url="r2.pdf")

        custody = CashCustody.load(self.txn.id, for_update=False)
        self.assertEqual(custody.transfer.receipt_url, "r.pdf")

    def test_receipt_of_losing_deposit_is_discarded(self):
        initiate_transfer(self.txn.id, self.manager)
        accept_cash(self.txn.id, self.area_manager)

        stored = []
        store = custody_service.store_receipt

        def store_then_lose_race(uploaded_file):
            name, url = store(uploaded_file)
            stored.append(name)
            # Another request deposits while the file is being uploaded.
            deposit_cash(self.txn.id, self.area_manager, receipt_url="winner.pdf")
            return name, url

        with patch.object(custody_service, "store_receipt", side_effect=store_then_lose_race):
            with self.assertRaises(Conflict):
                deposit_cash(
                    self.txn.id,
                    self.area_manager,
                    receipt_file=SimpleUploadedFile("slip.pdf", b"%PDF-1.4"),
                )

        self.assertEqual(len(stored), 1)
        self.assertFalse(default_storage.exists(stored[0]))

        custody = CashCustody.load(self.txn.id, for_update=False)
        self.assertEqual(custody.transfer.receipt_url, "winner.pdf")
