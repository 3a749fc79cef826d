from django.urls import path, include
from rest_framework.routers import DefaultRouter

from cash.api.floating import FloatingCashAPIView
from cash.views import CashTransactionViewSet, ShiftCashTransactionCreateView

router = DefaultRouter()
router.register("transactions", CashTransactionViewSet, basename="cash-transactions")

urlpatterns = [
    path(
        "shifts/<uuid:shift_id>/transactions/",
        ShiftCashTransactionCreateView.as_view(),
        name="cash-shift-transaction-create",
    ),
    path("floating-cash/", FloatingCashAPIView.as_view(), name="cash-floating"),
    path("", include(router.urls)),
]
