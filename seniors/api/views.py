from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from seniors.api.serializers import (
    ApplicationSerializer,
    ApplicationSubmitSerializer,
    ComplaintSerializer,
    IdIssuanceSerializer,
    LoginSerializer,
    MasterlistRecordSerializer,
    RegistryRecordSerializer,
    StatusTransitionSerializer,
)
from seniors.models import Application, Complaint, IdIssuance, MasterlistRecord, RegistryRecord
from seniors.services.application_service import ApplicationService
from seniors.services.complaint_service import ComplaintService, portal_statistics
from seniors.services.registry_service import RegistryService
from seniors.services.session_service import SessionService


def serialize_application(application):
    if isinstance(application, IdIssuance):
        return IdIssuanceSerializer(application).data
    return ApplicationSerializer(application).data


class ApplicationListView(APIView):
    """
    General applications (registration, benefits, PhilHealth).

    GET  /api/v1/applications/
    POST /api/v1/applications/

    Request body:
    {
        "userId": "u_1001",
        "userName": "JUAN DELA CRUZ",
        "type": "Registration",
        "description": "Online registration",
        "formData": {"firstName": "Juan", "lastName": "Dela Cruz", "birthDate": "1950-01-01"}
    }
    """

    model = Application
    serializer_class = ApplicationSerializer

    def get(self, request):
        records = self.model.objects.all()
        return Response(self.serializer_class(records, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = ApplicationSubmitSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.submit(ApplicationService(), serializer.validated_data)
        if result["ok"]:
            return Response(result, status=status.HTTP_201_CREATED)
        return Response(result, status=status.HTTP_400_BAD_REQUEST)

    def submit(self, service, payload):
        return service.submit_application(payload)


class IdIssuanceListView(ApplicationListView):
    """
    ID issuance requests. Always filed as Pending.

    GET  /api/v1/id-issuances/
    POST /api/v1/id-issuances/
    """

    model = IdIssuance
    serializer_class = IdIssuanceSerializer

    def submit(self, service, payload):
        payload.pop("status", None)
        return service.submit_id_issuance(payload)


class ApplicationDetailView(APIView):
    """
    GET   /api/v1/applications/{app_id}/
    PATCH /api/v1/applications/{app_id}/

    Works for ids of either collection. PATCH takes a partial update; an
    ``id_status`` key also updates the citizen's masterlist ID status.
    """

    def get(self, request, app_id):
        application = ApplicationService().find_application(app_id)
        if application is None:
            return Response({"error": "Application not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(serialize_application(application), status=status.HTTP_200_OK)

    def patch(self, request, app_id):
        service = ApplicationService()
        result = service.edit_application_fields(app_id, dict(request.data))

        if result["ok"]:
            application = service.find_application(app_id)
            return Response(serialize_application(application), status=status.HTTP_200_OK)
        if service.find_application(app_id) is None:
            return Response(result, status=status.HTTP_404_NOT_FOUND)
        return Response(result, status=status.HTTP_400_BAD_REQUEST)


class ApplicationStatusView(APIView):
    """
    Approve, reject, revert or release an application.

    POST /api/v1/applications/{app_id}/status/

    Request body:
    {
        "status": "Rejected",
        "reason": "Incomplete requirements"
    }
    """

    def post(self, request, app_id):
        serializer = StatusTransitionSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        service = ApplicationService()
        if service.find_application(app_id) is None:
            return Response({"error": "Application not found"}, status=status.HTTP_404_NOT_FOUND)

        service.transition_status(
            app_id, serializer.validated_data["status"], serializer.validated_data.get("reason")
        )
        application = service.find_application(app_id)
        return Response(serialize_application(application), status=status.HTTP_200_OK)


class ApplicationReleaseView(APIView):
    """
    Release the ID card of an approved application.

    POST /api/v1/applications/{app_id}/release/
    """

    def post(self, request, app_id):
        service = ApplicationService()
        if service.find_application(app_id) is None:
            return Response({"error": "Application not found"}, status=status.HTTP_404_NOT_FOUND)

        service.mark_issued(app_id)
        application = service.find_application(app_id)
        return Response(serialize_application(application), status=status.HTTP_200_OK)


class MasterlistListView(APIView):
    """GET /api/v1/masterlist/"""

    def get(self, request):
        records = MasterlistRecord.objects.all()
        return Response(MasterlistRecordSerializer(records, many=True).data, status=status.HTTP_200_OK)


class MasterlistDetailView(APIView):
    """GET /api/v1/masterlist/{record_id}/"""

    def get(self, request, record_id):
        record = MasterlistRecord.objects.filter(id=record_id).first()
        if record is None:
            return Response({"error": "Record not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(MasterlistRecordSerializer(record).data, status=status.HTTP_200_OK)


class LoginView(APIView):
    """
    POST /api/v1/auth/login/

    Request body:
    {
        "username": "admin",
        "password": "admin123"
    }
    """

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = SessionService().login(
            serializer.validated_data["username"],
            serializer.validated_data["password"],
            session=request.session,
        )
        if user is None:
            return Response({"error": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)
        return Response(user, status=status.HTTP_200_OK)


class LogoutView(APIView):
    """POST /api/v1/auth/logout/"""

    def post(self, request):
        SessionService().logout(request.session)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CurrentUserView(APIView):
    """GET /api/v1/auth/me/"""

    def get(self, request):
        user = SessionService().current_user(request.session)
        if user is None:
            return Response({"error": "Not logged in"}, status=status.HTTP_401_UNAUTHORIZED)
        return Response(user, status=status.HTTP_200_OK)


class UserUpdateView(APIView):
    """PATCH /api/v1/users/{user_id}/"""

    def patch(self, request, user_id):
        result = SessionService().update_user(user_id, dict(request.data), session=request.session)
        if result["ok"]:
            return Response(result["user"], status=status.HTTP_200_OK)
        return Response(result, status=status.HTTP_404_NOT_FOUND)


class ComplaintListView(APIView):
    """
    GET  /api/v1/complaints/
    POST /api/v1/complaints/
    """

    def get(self, request):
        complaints = Complaint.objects.all()
        return Response(ComplaintSerializer(complaints, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = ComplaintSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = ComplaintService().add_complaint(
            {
                "userId": request.data.get("userId", ""),
                "userName": request.data.get("userName", ""),
                "subject": serializer.validated_data["subject"],
                "details": serializer.validated_data["details"],
            }
        )
        if result["ok"]:
            complaint = Complaint.objects.get(id=result["id"])
            return Response(ComplaintSerializer(complaint).data, status=status.HTTP_201_CREATED)
        return Response(result, status=status.HTTP_400_BAD_REQUEST)


class ComplaintResolveView(APIView):
    """POST /api/v1/complaints/{complaint_id}/resolve/"""

    def post(self, request, complaint_id):
        result = ComplaintService().resolve_complaint(complaint_id)
        if result["ok"]:
            return Response(result, status=status.HTTP_200_OK)
        return Response(result, status=status.HTTP_404_NOT_FOUND)


class RegistrySearchView(APIView):
    """
    GET /api/v1/registry/?type=LCR&search=cruz&seniors=1

    ``seniors=1`` keeps only unregistered civil registry records of residents
    old enough to enroll.
    """

    def get(self, request):
        service = RegistryService()
        search = request.query_params.get("search", "")
        if request.query_params.get("seniors"):
            records = service.senior_candidates(search)
        else:
            registry_type = request.query_params.get("type", RegistryRecord.TYPE_LCR)
            records = service.search_registry(registry_type, search)
        return Response(RegistryRecordSerializer(records, many=True).data, status=status.HTTP_200_OK)


class RegistryRecordView(APIView):
    """
    GET /api/v1/registry/{record_id}/

    Returns the registry record and a registration form prefilled from it.
    """

    def get(self, request, record_id):
        service = RegistryService()
        record = service.verify_identity(record_id)
        if record is None:
            return Response({"error": "Registry record not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {
                "record": RegistryRecordSerializer(record).data,
                "registrationForm": service.build_registration_form(record),
            },
            status=status.HTTP_200_OK,
        )


class WalkInRegistrationView(APIView):
    """
    POST /api/v1/registrations/walk-in/

    Request body:
    {
        "formData": {"firstName": "MARIA", "lastName": "SANTOS", "birthDate": "1955-03-15"},
        "documents": []
    }
    """

    def post(self, request):
        form_data = request.data.get("formData")
        if not isinstance(form_data, dict) or not form_data.get("lastName"):
            return Response(
                {"error": "formData with at least lastName is required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = RegistryService().register_walk_in(form_data, request.data.get("documents"))
        if result["ok"]:
            return Response(result, status=status.HTTP_201_CREATED)
        return Response(result, status=status.HTTP_400_BAD_REQUEST)


class DashboardView(APIView):
    """GET /api/v1/dashboard/"""

    def get(self, request):
        return Response(portal_statistics(), status=status.HTTP_200_OK)
