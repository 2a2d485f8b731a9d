import logging
from typing import Optional

from django.conf import settings

from seniors.models import MasterlistRecord, PortalUser, Role

logger = logging.getLogger(__name__)

# User update key -> PortalUser field
USER_FIELDS = {
    "name": "name",
    "firstName": "first_name",
    "middleName": "middle_name",
    "lastName": "last_name",
    "suffix": "suffix",
    "email": "email",
    "avatarUrl": "avatar_url",
    "birthDate": "birth_date",
    "address": "address",
    "contactNumber": "contact_number",
    "seniorIdNumber": "senior_id_number",
}


def user_to_dict(user: PortalUser) -> dict:
    """Session view of a back office user (credentials left out)."""
    data = {key: getattr(user, field) for key, field in USER_FIELDS.items()}
    data.update(user.profile or {})
    data.update({"id": user.id, "role": user.role, "username": user.username})
    return data


def citizen_to_dict(record: MasterlistRecord) -> dict:
    """Citizen login view derived from a masterlist record."""
    return {
        "id": record.id,
        "username": record.username,
        "name": record.full_name,
        "email": record.email or f"{record.username}@{settings.OSCA_CITIZEN_EMAIL_DOMAIN}",
        "role": Role.CITIZEN,
    }


class SessionService:
    """
    Login against the two credential sources: seeded back office users,
    then citizen credentials on the masterlist.

    Credentials are compared as plain text. The current user is kept in the
    Django session under the same key the browser client uses.
    """

    def login(self, username: str, password: str, session=None) -> Optional[dict]:
        """
        Args:
            username: Portal username
            password: Portal password
            session: Optional Django session to store the user in

        Returns:
            dict or None: The logged-in user view, None on bad credentials
        """
        user = None
        admin = PortalUser.objects.filter(username=username, password=password).first()
        if admin:
            user = user_to_dict(admin)
        else:
            citizen = (
                MasterlistRecord.objects.filter(username=username, password=password)
                .exclude(username="")
                .first()
            )
            if citizen:
                user = citizen_to_dict(citizen)

        if user is None:
            logger.info(f"Failed login for {username}")
            return None

        if session is not None:
            session[settings.OSCA_CURRENT_USER_KEY] = user
        logger.info(f"{user['role']} {username} logged in")
        return user

    def logout(self, session) -> None:
        session.pop(settings.OSCA_CURRENT_USER_KEY, None)
        session.pop(settings.OSCA_AUTH_TOKEN_KEY, None)

    def current_user(self, session) -> Optional[dict]:
        return session.get(settings.OSCA_CURRENT_USER_KEY)

    def update_user(self, user_id: str, updates: dict, session=None) -> dict:
        """
        Merge profile updates into a back office user.

        Known fields go to their columns, anything else into ``profile``. The
        session copy is refreshed when it is the current user.

        Returns:
            dict: ``{"ok": True, "user": ...}`` or ``{"ok": False, "error": ...}``
        """
        user = PortalUser.objects.filter(id=user_id).first()
        if user is None:
            return {"ok": False, "error": f"User {user_id} not found"}

        profile = dict(user.profile or {})
        for key, value in updates.items():
            if key in USER_FIELDS:
                setattr(user, USER_FIELDS[key], value)
            elif key not in ("id", "role", "username", "password"):
                profile[key] = value
        user.profile = profile
        user.save()

        data = user_to_dict(user)
        if session is not None:
            current = session.get(settings.OSCA_CURRENT_USER_KEY)
            if current and current.get("id") == user_id:
                session[settings.OSCA_CURRENT_USER_KEY] = {**current, **data}
        return {"ok": True, "user": data}
