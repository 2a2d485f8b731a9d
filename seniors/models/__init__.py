from .application import Application, ApplicationStatus, ApplicationType, BaseApplication, IdIssuance
from .complaint import Complaint
from .masterlist import IdStatus, MasterlistRecord
from .registry import RegistryRecord
from .user import PortalUser, Role

__all__ = [
    "Application",
    "ApplicationStatus",
    "ApplicationType",
    "BaseApplication",
    "Complaint",
    "IdIssuance",
    "IdStatus",
    "MasterlistRecord",
    "PortalUser",
    "RegistryRecord",
    "Role",
]
