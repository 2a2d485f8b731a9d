from django.contrib import admin
from seniors.models import (
    Application,
    Complaint,
    IdIssuance,
    MasterlistRecord,
    PortalUser,
    RegistryRecord,
)


class BaseApplicationAdmin(admin.ModelAdmin):
    list_display = ("id", "user_name", "type", "status", "date", "released_date")
    list_filter = ("status", "type", "date")
    search_fields = ("id", "user_id", "user_name")
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        ("Applicant", {"fields": ("id", "user_id", "user_name")}),
        ("Request", {"fields": ("type", "date", "description", "documents")}),
        ("Status", {"fields": ("status", "rejection_reason", "released_date")}),
        ("Form Data", {"fields": ("form_data",), "classes": ("collapse",)}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )


@admin.register(Application)
class ApplicationAdmin(BaseApplicationAdmin):
    pass


@admin.register(IdIssuance)
class IdIssuanceAdmin(BaseApplicationAdmin):
    pass


@admin.register(MasterlistRecord)
class MasterlistRecordAdmin(admin.ModelAdmin):
    list_display = ("scid_number", "full_name", "birth_date", "barangay", "id_status", "released_date")
    list_filter = ("id_status", "barangay", "sex")
    search_fields = ("scid_number", "full_name", "username")
    readonly_fields = ("created_at", "updated_at")


@admin.register(PortalUser)
class PortalUserAdmin(admin.ModelAdmin):
    list_display = ("username", "name", "role", "email")
    list_filter = ("role",)
    search_fields = ("username", "name", "email")


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ("id", "subject", "user_name", "status", "date")
    list_filter = ("status", "date")
    search_fields = ("subject", "user_name", "details")


@admin.register(RegistryRecord)
class RegistryRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "last_name", "first_name", "birth_date", "is_registered")
    list_filter = ("type", "is_registered")
    search_fields = ("id", "last_name", "first_name", "full_name")
