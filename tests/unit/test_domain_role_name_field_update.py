"""Unit tests for RoleName parsing and three-state field updates."""

import pytest

from src.core.result import Failure, Success
from src.domain.enums import RoleName
from src.domain.errors import NameTooShort, RoleNameInvalid
from src.domain.value_objects import (
    UNCHANGED,
    Changed,
    PersonName,
    Unchanged,
    validate_optional,
)


@pytest.mark.unit
class TestRoleName:
    """Test RoleName enum."""

    @pytest.mark.parametrize("raw", ["ROLE_USER", "ROLE_ADMIN", "ROLE_SUPER_ADMIN"])
    def test_parse_accepts_exact_values(self, raw):
        result = RoleName.parse(raw)

        assert isinstance(result, Success)
        assert result.value.value == raw

    @pytest.mark.parametrize("raw", ["", "USER", "role_user", "ROLE_GUEST"])
    def test_parse_rejects_unknown_names(self, raw):
        assert RoleName.parse(raw) == Failure(error=RoleNameInvalid())

    def test_role_name_is_a_string(self):
        assert RoleName.ADMIN == "ROLE_ADMIN"


@pytest.mark.unit
class TestValidateOptional:
    """Test validate_optional three-state result."""

    def test_none_is_unchanged(self):
        result = validate_optional(None, PersonName.create)

        assert result == Success(value=UNCHANGED)
        assert isinstance(result.value, Unchanged)

    def test_valid_value_is_changed(self):
        result = validate_optional("Jane", PersonName.create)

        assert result == Success(value=Changed(value=PersonName("Jane")))

    def test_invalid_value_is_failure(self):
        result = validate_optional("J", PersonName.create)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NameTooShort)

    def test_empty_string_is_validated_not_skipped(self):
        """Only None means 'not supplied'; an empty string is a bad value."""
        result = validate_optional("", PersonName.create)

        assert isinstance(result, Failure)
