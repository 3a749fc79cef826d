from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from accounts.constants import UserRole
from accounts.models import User
from stations.models import Station
from stations.models_inventory import Tank, Nozzle
from stations.services.shift import create_shift


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(employee_id, role=UserRole.STATION_MANAGER, **extra):
        return User.objects.create_user(
            username=employee_id.lower(),
            password="pass1234",
            employee_id=employee_id,
            role=role,
            **extra,
        )
    return _make


@pytest.fixture
def area_manager(make_user):
    return make_user("AM001", role=UserRole.AREA_MANAGER)


@pytest.fixture
def admin_user(make_user):
    return make_user("ADM001", role=UserRole.ADMIN)


@pytest.fixture
def station(db, area_manager):
    return Station.objects.create(
        name="Station Olaya",
        address="King Fahd Rd",
        area_manager=area_manager,
    )


@pytest.fixture
def other_station(db):
    return Station.objects.create(name="Station Malaz")


@pytest.fixture
def station_manager(make_user, station, area_manager):
    return make_user(
        "SM001",
        station=station,
        area_manager=area_manager,
    )


@pytest.fixture
def make_tank(db):
    def _make(station, fuel_type="91", capacity=None, current_level="0"):
        return Tank.objects.create(
            station=station,
            fuel_type=fuel_type,
            capacity=Decimal(capacity) if capacity is not None else None,
            current_level=Decimal(current_level),
        )
    return _make


@pytest.fixture
def make_nozzle(db):
    def _make(tank, name):
        return Nozzle.objects.create(
            station=tank.station,
            tank=tank,
            fuel_type=tank.fuel_type,
            name=name,
        )
    return _make


@pytest.fixture
def open_shift(station, station_manager):
    return create_shift(station.id, "DAY", user=station_manager)
