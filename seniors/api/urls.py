from django.urls import path
from seniors.api.views import (
    ApplicationDetailView,
    ApplicationListView,
    ApplicationReleaseView,
    ApplicationStatusView,
    ComplaintListView,
    ComplaintResolveView,
    CurrentUserView,
    DashboardView,
    IdIssuanceListView,
    LoginView,
    LogoutView,
    MasterlistDetailView,
    MasterlistListView,
    RegistryRecordView,
    RegistrySearchView,
    UserUpdateView,
    WalkInRegistrationView,
)

urlpatterns = [
    path("applications/", ApplicationListView.as_view(), name="applications"),
    path("id-issuances/", IdIssuanceListView.as_view(), name="id-issuances"),
    # Application ids are unique across both collections
    path(
        "applications/<str:app_id>/", ApplicationDetailView.as_view(), name="application-detail"
    ),
    path(
        "applications/<str:app_id>/status/",
        ApplicationStatusView.as_view(),
        name="application-status",
    ),
    path(
        "applications/<str:app_id>/release/",
        ApplicationReleaseView.as_view(),
        name="application-release",
    ),
    path("masterlist/", MasterlistListView.as_view(), name="masterlist"),
    path("masterlist/<str:record_id>/", MasterlistDetailView.as_view(), name="masterlist-detail"),
    # Session
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("auth/me/", CurrentUserView.as_view(), name="current-user"),
    path("users/<str:user_id>/", UserUpdateView.as_view(), name="user-update"),
    # Complaints
    path("complaints/", ComplaintListView.as_view(), name="complaints"),
    path(
        "complaints/<str:complaint_id>/resolve/",
        ComplaintResolveView.as_view(),
        name="complaint-resolve",
    ),
    # Registry and walk-in enrollment
    path("registry/", RegistrySearchView.as_view(), name="registry-search"),
    path("registry/<str:record_id>/", RegistryRecordView.as_view(), name="registry-record"),
    path(
        "registrations/walk-in/", WalkInRegistrationView.as_view(), name="walk-in-registration"
    ),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
]
