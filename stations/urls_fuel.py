from django.urls import path

from stations.views_fuel.pricing import FuelPriceListCreateView, StationCurrentPricesView
from stations.views_fuel.sales import (
    ShiftSalesView,
    NozzleSaleUpdateView,
    ShiftPaymentsView,
    ShiftSalesSubmitView,
)

urlpatterns = [
    path("prices/", FuelPriceListCreateView.as_view(), name="fuel-prices"),
    path("prices/station/<uuid:station_id>/", StationCurrentPricesView.as_view(), name="fuel-prices-current"),

    path("sales/shift/<uuid:shift_id>/", ShiftSalesView.as_view(), name="fuel-sales-shift"),
    path("sales/shift/<uuid:shift_id>/payments/", ShiftPaymentsView.as_view(), name="fuel-sales-payments"),
    path("sales/shift/<uuid:shift_id>/submit/", ShiftSalesSubmitView.as_view(), name="fuel-sales-submit"),
    path("sales/<uuid:sale_id>/", NozzleSaleUpdateView.as_view(), name="fuel-sale-update"),
]
