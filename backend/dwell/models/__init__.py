"""Database models for the Dwell messaging core."""
from .base import Base
from .listing import Listing
from .message import Message
from .report import Report, ReportCategory
from .user import User
from .user_block import UserBlock, normalize_pair

__all__ = [
    "Base",
    "Listing",
    "Message",
    "Report",
    "ReportCategory",
    "User",
    "UserBlock",
    "normalize_pair",
]
