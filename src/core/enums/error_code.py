"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention.
Every failure variant carries exactly one code; codes never overlap.

Categories:
- Value validation errors (EMAIL_*, NAME_*, PASSWORD_*, COMPANY_NAME_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, ACCOUNT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Email validation
    EMAIL_EMPTY = "email_empty"
    EMAIL_MISSING_AT_SYMBOL = "email_missing_at_symbol"
    EMAIL_INVALID_FORMAT = "email_invalid_format"
    EMAIL_TOO_SHORT = "email_too_short"
    EMAIL_TOO_LONG = "email_too_long"

    # Person name validation
    NAME_EMPTY = "name_empty"
    NAME_TOO_SHORT = "name_too_short"
    NAME_TOO_LONG = "name_too_long"
    NAME_INVALID_FORMAT = "name_invalid_format"

    # Password validation
    PASSWORD_EMPTY = "password_empty"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_MISSING_UPPERCASE = "password_missing_uppercase"
    PASSWORD_MISSING_LOWERCASE = "password_missing_lowercase"
    PASSWORD_MISSING_DIGIT = "password_missing_digit"
    PASSWORD_MISSING_SPECIAL_CHARACTER = "password_missing_special_character"

    # Company name validation
    COMPANY_NAME_EMPTY = "company_name_empty"
    COMPANY_NAME_TOO_SHORT = "company_name_too_short"
    COMPANY_NAME_TOO_LONG = "company_name_too_long"
    COMPANY_NAME_INVALID_FORMAT = "company_name_invalid_format"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    ROLE_NAME_INVALID = "role_name_invalid"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_DISABLED = "account_disabled"
    ACCOUNT_LOCKED = "account_locked"
