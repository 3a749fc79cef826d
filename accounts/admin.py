from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from accounts.models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("employee_id", "username", "role", "station", "area_manager", "is_active")
    list_filter = ("role", "station", "is_active")
    search_fields = ("employee_id", "username", "first_name", "last_name")
    ordering = ("employee_id",)

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Station", {"fields": ("employee_id", "role", "station", "area_manager")}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Station", {"fields": ("employee_id", "role", "station", "area_manager")}),
    )
