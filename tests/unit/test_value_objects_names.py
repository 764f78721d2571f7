"""Unit tests for PersonName and CompanyName value objects.

Tests cover:
- Boundary lengths (min/max accepted, one past rejected)
- Allowed character sets (letters in any script, punctuation sets)
- Rule order: empty, too short, too long, invalid format
"""

import pytest

from src.core.result import Failure, Success
from src.domain.errors import (
    CompanyNameEmpty,
    CompanyNameInvalidFormat,
    CompanyNameTooLong,
    CompanyNameTooShort,
    NameEmpty,
    NameInvalidFormat,
    NameTooLong,
    NameTooShort,
)
from src.domain.value_objects import CompanyName, PersonName


@pytest.mark.unit
class TestPersonName:
    """Test PersonName value object."""

    @pytest.mark.parametrize(
        "raw", ["Jo", "Anne-Marie", "O'Brien", "Mary Ann", "Zoë", "Łukasz", "x" * 50]
    )
    def test_accepts_valid_names(self, raw):
        result = PersonName.create(raw)

        assert isinstance(result, Success)
        assert str(result.value) == raw

    def test_empty_string_is_empty(self):
        assert PersonName.create("") == Failure(error=NameEmpty())

    def test_single_space_is_too_short_not_empty(self):
        assert PersonName.create(" ") == Failure(error=NameTooShort(min_length=2))

    def test_spaces_only_pass_as_allowed_characters(self):
        assert isinstance(PersonName.create("  "), Success)

    def test_single_character_is_too_short(self):
        result = PersonName.create("J")

        assert isinstance(result.error, NameTooShort)
        assert result.error.message == "Name is too short (minimum length: 2)"

    def test_fifty_one_characters_is_too_long(self):
        result = PersonName.create("x" * 51)

        assert isinstance(result.error, NameTooLong)
        assert result.error.max_length == 50

    @pytest.mark.parametrize("raw", ["John3", "J@ne", "Ann_Lee"])
    def test_digits_and_symbols_are_invalid(self, raw):
        assert isinstance(PersonName.create(raw).error, NameInvalidFormat)

    def test_short_check_runs_before_format_check(self):
        """'1' is both too short and invalid; length is checked first."""
        assert isinstance(PersonName.create("1").error, NameTooShort)

    def test_direct_construction_raises_for_invalid(self):
        with pytest.raises(ValueError, match="letters, spaces, hyphens"):
            PersonName("John3")


@pytest.mark.unit
class TestCompanyName:
    """Test CompanyName value object."""

    @pytest.mark.parametrize(
        "raw", ["AB", "Acme Inc.", "Smith & Sons", "Co-op 24", "O'Neil, Ltd", "c" * 100]
    )
    def test_accepts_valid_names(self, raw):
        assert isinstance(CompanyName.create(raw), Success)

    def test_empty_string_is_empty(self):
        assert CompanyName.create("") == Failure(error=CompanyNameEmpty())

    def test_single_space_is_too_short(self):
        assert CompanyName.create(" ") == Failure(
            error=CompanyNameTooShort(min_length=2)
        )

    def test_single_character_is_too_short(self):
        assert isinstance(CompanyName.create("A").error, CompanyNameTooShort)

    def test_over_one_hundred_characters_is_too_long(self):
        result = CompanyName.create("c" * 101)

        assert isinstance(result.error, CompanyNameTooLong)
        assert result.error.message == "Company name is too long (maximum length: 100)"

    @pytest.mark.parametrize("raw", ["Acme!", "Foo/Bar", "Shop@Home"])
    def test_unsupported_symbols_are_invalid(self, raw):
        assert isinstance(CompanyName.create(raw).error, CompanyNameInvalidFormat)
