from decimal import Decimal

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from cash.models import CashStatus
from cash.services.custody import create_cash_transaction, initiate_transfer, accept_cash
from stations.services.shift import create_shift, lock_shift

pytestmark = pytest.mark.django_db


@pytest.fixture
def cash_transaction(station, station_manager):
    shift = create_shift(station.id, "DAY", user=station_manager)
    lock_shift(shift.id, station_manager)
    return create_cash_transaction(
        shift.id, station_manager, Decimal("200"), Decimal("2.00"),
    )


def test_manual_transaction_via_api(api_client, station, station_manager):
    shift = create_shift(station.id, "DAY", user=station_manager)
    api_client.force_authenticate(user=station_manager)
    url = f"/api/v1/cash/shifts/{shift.id}/transactions/"
    payload = {
        "liters_sold": "1000",
        "rate_per_liter": "2.18",
        "card_payments": "800",
        "bank_deposit": "300",
    }

    resp = api_client.post(url, payload, format="json")
    assert resp.status_code == 201
    assert resp.data["cash_to_am"] == "1080.00"

    resp = api_client.post(url, payload, format="json")
    assert resp.status_code == 409


def test_custody_chain_via_api(api_client, cash_transaction, station_manager, area_manager):
    base = f"/api/v1/cash/transactions/{cash_transaction.id}"

    api_client.force_authenticate(user=station_manager)
    resp = api_client.post(f"{base}/transfer/")
    assert resp.status_code == 201
    assert resp.data["transfer"]["to_user"] == area_manager.id

    # Station managers never accept
    assert api_client.post(f"{base}/accept/").status_code == 403

    api_client.force_authenticate(user=area_manager)
    resp = api_client.post(f"{base}/accept/")
    assert resp.status_code == 200
    assert resp.data["status"] == CashStatus.WITH_AM

    assert api_client.post(f"{base}/accept/").status_code == 409

    receipt = SimpleUploadedFile("deposit.pdf", b"%PDF-1.4 slip", content_type="application/pdf")
    resp = api_client.post(f"{base}/deposit/", {"receipt": receipt}, format="multipart")
    assert resp.status_code == 200
    assert resp.data["status"] == CashStatus.DEPOSITED
    assert "receipt-" in resp.data["transfer"]["receipt_url"]


def test_deposit_without_receipt(api_client, cash_transaction, station_manager, area_manager):
    initiate_transfer(cash_transaction.id, station_manager)
    accept_cash(cash_transaction.id, area_manager)
    api_client.force_authenticate(user=area_manager)

    resp = api_client.post(f"/api/v1/cash/transactions/{cash_transaction.id}/deposit/", {}, format="json")

    assert resp.status_code == 400


def test_deposit_rejects_unknown_file_type(api_client, cash_transaction, station_manager, area_manager):
    initiate_transfer(cash_transaction.id, station_manager)
    accept_cash(cash_transaction.id, area_manager)
    api_client.force_authenticate(user=area_manager)

    receipt = SimpleUploadedFile("deposit.exe", b"MZ", content_type="application/octet-stream")
    resp = api_client.post(
        f"/api/v1/cash/transactions/{cash_transaction.id}/deposit/",
        {"receipt": receipt},
        format="multipart",
    )

    assert resp.status_code == 400
    cash_transaction.refresh_from_db()
    assert cash_transaction.status == CashStatus.WITH_AM


def test_transaction_list_is_scoped(api_client, cash_transaction, make_user, other_station, area_manager):
    stranger = make_user("SM009", station=other_station)

    api_client.force_authenticate(user=stranger)
    assert api_client.get("/api/v1/cash/transactions/").data["count"] == 0

    api_client.force_authenticate(user=area_manager)
    assert api_client.get("/api/v1/cash/transactions/").data["count"] == 1


def test_unknown_transaction_returns_404(api_client, station_manager):
    api_client.force_authenticate(user=station_manager)

    resp = api_client.post(
        "/api/v1/cash/transactions/00000000-0000-0000-0000-000000000000/transfer/"
    )

    assert resp.status_code == 404


def test_floating_cash(api_client, cash_transaction, station_manager, area_manager, admin_user):
    initiate_transfer(cash_transaction.id, station_manager)

    api_client.force_authenticate(user=area_manager)
    assert api_client.get("/api/v1/cash/floating-cash/").status_code == 403

    api_client.force_authenticate(user=admin_user)
    resp = api_client.get("/api/v1/cash/floating-cash/")

    assert resp.status_code == 200
    assert resp.data["total_floating"] == Decimal("400.00")
    assert resp.data["breakdown"]["pending_acceptance"] == Decimal("400.00")
    assert resp.data["breakdown"]["with_am"] == Decimal("0.00")
    assert len(resp.data["transactions"]) == 1
