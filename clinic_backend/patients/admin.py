"""
Patients App - Admin

The admin site is the only place patients can be deleted.
"""

from django.contrib import admin

from clinic_backend.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "full_name",
        "date_of_birth",
        "email",
        "created_at",
    )
    list_filter = ("created_at", "updated_at")
    search_fields = ("first_name", "last_name", "email")
    ordering = ("last_name", "first_name")
    list_per_page = 50

    readonly_fields = ("id", "medication_list", "created_at", "updated_at")

    fieldsets = (
        ("Patient", {
            "fields": ("first_name", "last_name", "date_of_birth", "email")
        }),
        ("Medication", {
            "fields": ("medication_list",),
        }),
        ("System", {
            "fields": ("id", "created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    @admin.display(description="Name", ordering="last_name")
    def full_name(self, obj):
        return f"{obj.last_name}, {obj.first_name}"
