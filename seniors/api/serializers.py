from rest_framework import serializers
from seniors.models import (
    Application,
    ApplicationStatus,
    ApplicationType,
    Complaint,
    IdIssuance,
    MasterlistRecord,
    RegistryRecord,
)
from seniors.utils.dates import calculate_age


class ApplicationSerializer(serializers.ModelSerializer):
    """Read serializer for both application collections."""

    userId = serializers.CharField(source="user_id", read_only=True)
    userName = serializers.CharField(source="user_name", read_only=True)
    rejectionReason = serializers.CharField(source="rejection_reason", read_only=True)
    releasedDate = serializers.DateTimeField(source="released_date", read_only=True)
    formData = serializers.JSONField(source="form_data", read_only=True)

    class Meta:
        model = Application
        fields = [
            "id",
            "userId",
            "userName",
            "type",
            "date",
            "status",
            "description",
            "documents",
            "rejectionReason",
            "releasedDate",
            "formData",
        ]
        read_only_fields = fields


class IdIssuanceSerializer(ApplicationSerializer):
    class Meta(ApplicationSerializer.Meta):
        model = IdIssuance


class ApplicationSubmitSerializer(serializers.Serializer):
    """Validates a submission payload; the service receives it in camelCase."""

    userId = serializers.CharField(required=False, allow_blank=True, default="")
    userName = serializers.CharField(required=False, allow_blank=True, default="")
    type = serializers.ChoiceField(choices=ApplicationType.choices)
    status = serializers.ChoiceField(choices=ApplicationStatus.choices, required=False)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    documents = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    formData = serializers.DictField(required=False, default=dict)


class StatusTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ApplicationStatus.choices)
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class MasterlistRecordSerializer(serializers.ModelSerializer):
    """Masterlist record with both SCID spellings, as the ID screens read them."""

    fullName = serializers.CharField(source="full_name")
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    middleName = serializers.CharField(source="middle_name")
    birthDate = serializers.CharField(source="birth_date")
    birthPlace = serializers.CharField(source="birth_place")
    seniorIdNumber = serializers.CharField(source="senior_id_number")
    civilStatus = serializers.CharField(source="civil_status", allow_null=True)
    releasedDate = serializers.DateTimeField(source="released_date", allow_null=True)
    formData = serializers.JSONField(source="form_data")

    class Meta:
        model = MasterlistRecord
        fields = [
            "id",
            "fullName",
            "firstName",
            "lastName",
            "middleName",
            "birthDate",
            "birthPlace",
            "seniorIdNumber",
            "scid_number",
            "id_status",
            "address",
            "house_no",
            "street",
            "barangay",
            "city_municipality",
            "province",
            "district",
            "email",
            "contact_number",
            "sex",
            "civilStatus",
            "username",
            "password",
            "releasedDate",
            "formData",
        ]
        read_only_fields = fields


class ComplaintSerializer(serializers.ModelSerializer):
    userId = serializers.CharField(source="user_id", required=False, allow_blank=True)
    userName = serializers.CharField(source="user_name", required=False, allow_blank=True)
    aiSummary = serializers.CharField(source="ai_summary", read_only=True)

    class Meta:
        model = Complaint
        fields = ["id", "userId", "userName", "date", "subject", "details", "status", "aiSummary"]
        read_only_fields = ["id", "date", "status", "aiSummary"]


class RegistryRecordSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source="first_name")
    middleName = serializers.CharField(source="middle_name")
    lastName = serializers.CharField(source="last_name")
    fullName = serializers.CharField(source="full_name")
    birthDate = serializers.CharField(source="birth_date")
    birthPlace = serializers.CharField(source="birth_place")
    civilStatus = serializers.CharField(source="civil_status")
    houseNo = serializers.CharField(source="house_no")
    isRegistered = serializers.BooleanField(source="is_registered")
    age = serializers.SerializerMethodField()

    class Meta:
        model = RegistryRecord
        fields = [
            "id",
            "type",
            "firstName",
            "middleName",
            "lastName",
            "fullName",
            "suffix",
            "citizenship",
            "birthDate",
            "birthPlace",
            "sex",
            "civilStatus",
            "province",
            "city",
            "district",
            "barangay",
            "street",
            "houseNo",
            "address",
            "isRegistered",
            "age",
            "status",
        ]
        read_only_fields = fields

    def get_age(self, obj):
        return calculate_age(obj.birth_date)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()
