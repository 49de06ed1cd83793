from enum import Enum


class AccountErrorCode(str, Enum):
    INVALID_EMAIL = "invalid_email"
    FORM_ERROR = "form_error"
    USERNAME_EXISTS = "username_exists"
    CODE_EXPIRED = "code_expired"


ACCOUNT_ERROR_MESSAGES: dict[AccountErrorCode, str] = {
    AccountErrorCode.INVALID_EMAIL: "Please enter a valid email address.",
    AccountErrorCode.FORM_ERROR: "Passwords must match and not be empty.",
    AccountErrorCode.USERNAME_EXISTS: "A user with this email address already exists.",
    AccountErrorCode.CODE_EXPIRED: "Your activation code has expired. Please request another.",
}
