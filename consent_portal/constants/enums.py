from enum import Enum


class ApprovalStatus(str, Enum):
    APPROVED = "APPROVED"
    DENIED = "DENIED"
    PENDING = "PENDING"


class TokenType(str, Enum):
    ACCESS = "access"
