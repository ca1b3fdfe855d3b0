from models.auth import LoginRequest, LoginResponse, MessageResponse
from models.dashboard import DashboardSnapshot
from models.prompt import AskRequest, AskResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "DashboardSnapshot",
    "AskRequest",
    "AskResponse",
]
