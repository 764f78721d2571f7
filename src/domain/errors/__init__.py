"""Domain errors package.

Closed failure taxonomy. Every validator and service result carries one
member of DomainFailure as its error.

Validation families (email, name, password, company name) and the
authentication family appear in DomainFailure by their base class: every
member of those families is handled the same way at the boundary. User and
role variants appear individually because each one maps to a distinct
outcome, so a new variant there must be handled explicitly.

Usage:
    from src.domain.errors import DomainFailure, UserIdNotExists
"""

from src.domain.errors.authentication_error import (
    AccountDisabled,
    AccountLocked,
    AuthenticationError,
    InvalidCredentials,
)
from src.domain.errors.company_name_error import (
    CompanyNameEmpty,
    CompanyNameError,
    CompanyNameInvalidFormat,
    CompanyNameTooLong,
    CompanyNameTooShort,
)
from src.domain.errors.email_error import (
    EmailEmpty,
    EmailError,
    EmailInvalidFormat,
    EmailMissingAtSymbol,
    EmailTooLong,
    EmailTooShort,
)
from src.domain.errors.password_error import (
    PasswordEmpty,
    PasswordError,
    PasswordMissingDigit,
    PasswordMissingLowercase,
    PasswordMissingSpecialCharacter,
    PasswordMissingUppercase,
    PasswordTooLong,
    PasswordTooShort,
)
from src.domain.errors.person_name_error import (
    NameEmpty,
    NameInvalidFormat,
    NameTooLong,
    NameTooShort,
    PersonNameError,
)
from src.domain.errors.role_error import RoleError, RoleNameInvalid, RoleNotFound
from src.domain.errors.user_error import (
    UserEmailAlreadyExists,
    UserError,
    UserIdNotExists,
)

type DomainFailure = (
    EmailError
    | PersonNameError
    | PasswordError
    | CompanyNameError
    | AuthenticationError
    | UserEmailAlreadyExists
    | UserIdNotExists
    | RoleNotFound
    | RoleNameInvalid
)

__all__ = [
    "DomainFailure",
    # Authentication
    "AuthenticationError",
    "InvalidCredentials",
    "AccountDisabled",
    "AccountLocked",
    # Company name
    "CompanyNameError",
    "CompanyNameEmpty",
    "CompanyNameTooShort",
    "CompanyNameTooLong",
    "CompanyNameInvalidFormat",
    # Email
    "EmailError",
    "EmailEmpty",
    "EmailMissingAtSymbol",
    "EmailInvalidFormat",
    "EmailTooShort",
    "EmailTooLong",
    # Password
    "PasswordError",
    "PasswordEmpty",
    "PasswordTooShort",
    "PasswordTooLong",
    "PasswordMissingUppercase",
    "PasswordMissingLowercase",
    "PasswordMissingDigit",
    "PasswordMissingSpecialCharacter",
    # Person name
    "PersonNameError",
    "NameEmpty",
    "NameTooShort",
    "NameTooLong",
    "NameInvalidFormat",
    # Role
    "RoleError",
    "RoleNotFound",
    "RoleNameInvalid",
    # User
    "UserError",
    "UserEmailAlreadyExists",
    "UserIdNotExists",
]
