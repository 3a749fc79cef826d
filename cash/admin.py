from django.contrib import admin

from cash.models import CashTransaction, CashTransfer


class CashTransferInline(admin.StackedInline):
    model = CashTransfer
    extra = 0
    can_delete = False
    readonly_fields = (
        "from_user", "to_user", "status", "receipt_url",
        "accepted_at", "deposited_at",
    )


@admin.register(CashTransaction)
class CashTransactionAdmin(admin.ModelAdmin):
    list_display = (
        "station", "shift", "total_revenue", "card_payments",
        "cash_to_am", "status", "created_at",
    )
    list_filter = ("status", "station")
    search_fields = ("station__name",)
    readonly_fields = ("status",)
    inlines = [CashTransferInline]


@admin.register(CashTransfer)
class CashTransferAdmin(admin.ModelAdmin):
    list_display = ("cash_transaction", "from_user", "to_user", "status", "deposited_at")
    list_filter = ("status",)
    search_fields = ("from_user__employee_id", "to_user__employee_id")
    readonly_fields = ("status",)
