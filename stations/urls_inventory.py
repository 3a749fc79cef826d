from django.urls import path

from stations.views_inventory.delivery import (
    StationDeliveryCreateView,
    TankDeliveryCreateView,
    DeliveryListView,
)
from stations.views_inventory.equipment import StationTanksView, StationNozzlesView
from stations.views_shift.shift import (
    CurrentShiftView,
    StationShiftListView,
    ShiftCreateView,
    ShiftDetailView,
    ShiftDeleteView,
    ShiftLockView,
    ShiftUnlockView,
)
from stations.views_shift.reading import ShiftReadingsView, ShiftReadingUpdateView

urlpatterns = [
    # Deliveries
    path("stations/<uuid:station_id>/deliveries/", StationDeliveryCreateView.as_view(), name="station-delivery-create"),
    path("tanks/<uuid:tank_id>/deliveries/", TankDeliveryCreateView.as_view(), name="tank-delivery-create"),
    path("deliveries/", DeliveryListView.as_view(), name="delivery-list"),

    # Equipment
    path("stations/<uuid:station_id>/tanks/", StationTanksView.as_view(), name="station-tanks"),
    path("stations/<uuid:station_id>/nozzles/", StationNozzlesView.as_view(), name="station-nozzles"),

    # Shifts
    path("shifts/stations/<uuid:station_id>/current/", CurrentShiftView.as_view(), name="shift-current"),
    path("shifts/stations/<uuid:station_id>/all/", StationShiftListView.as_view(), name="shift-list"),
    path("shifts/stations/<uuid:station_id>/create/", ShiftCreateView.as_view(), name="shift-create"),
    path("shifts/<uuid:shift_id>/", ShiftDeleteView.as_view(), name="shift-delete"),
    path("shifts/<uuid:shift_id>/details/", ShiftDetailView.as_view(), name="shift-details"),
    path("shifts/<uuid:shift_id>/lock/", ShiftLockView.as_view(), name="shift-lock"),
    path("shifts/<uuid:shift_id>/unlock/", ShiftUnlockView.as_view(), name="shift-unlock"),

    # Readings
    path("shifts/<uuid:shift_id>/readings/", ShiftReadingsView.as_view(), name="shift-readings"),
    path("shifts/<uuid:shift_id>/readings/<uuid:reading_id>/", ShiftReadingUpdateView.as_view(), name="shift-reading-update"),
]
