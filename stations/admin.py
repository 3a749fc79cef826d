from django.contrib import admin

from stations.models import Station, FuelPrice
from stations.models_inventory import Tank, Nozzle, TankerDelivery
from stations.models_shift import Shift, NozzleReading, NozzleSale


class TankInline(admin.TabularInline):
    model = Tank
    extra = 0


class NozzleInline(admin.TabularInline):
    model = Nozzle
    extra = 0


@admin.register(Station)
class StationAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "area_manager", "created_at")
    search_fields = ("name", "address")
    inlines = [TankInline, NozzleInline]


@admin.register(Tank)
class TankAdmin(admin.ModelAdmin):
    list_display = ("station", "fuel_type", "capacity", "current_level", "updated_at")
    list_filter = ("station", "fuel_type")


@admin.register(Nozzle)
class NozzleAdmin(admin.ModelAdmin):
    list_display = ("name", "station", "tank", "fuel_type")
    list_filter = ("station", "fuel_type")
    search_fields = ("name",)


@admin.register(TankerDelivery)
class TankerDeliveryAdmin(admin.ModelAdmin):
    list_display = (
        "tank",
        "liters_delivered",
        "level_after",
        "ticket_number",
        "delivery_date",
        "recorded_by",
    )
    list_filter = ("tank__station",)
    search_fields = ("ticket_number",)
    # Levels move through the delivery service only
    readonly_fields = ("level_after",)


class NozzleReadingInline(admin.TabularInline):
    model = NozzleReading
    extra = 0
    readonly_fields = ("opening_reading", "closing_reading", "consumption")


class NozzleSaleInline(admin.TabularInline):
    model = NozzleSale
    extra = 0


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = (
        "station",
        "sequence",
        "shift_type",
        "start_time",
        "end_time",
        "status",
        "locked",
    )
    list_filter = ("station", "shift_type", "status", "locked")
    readonly_fields = ("sequence", "locked_at", "locked_by", "unlocked_by")
    inlines = [NozzleReadingInline, NozzleSaleInline]


@admin.register(FuelPrice)
class FuelPriceAdmin(admin.ModelAdmin):
    list_display = ("station", "fuel_type", "price_per_liter", "effective_from", "created_by")
    list_filter = ("station", "fuel_type")
