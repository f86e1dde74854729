"""
Book Catalog Backend — ISBN-13 Validator Tests
===============================================

What:  Tests for the checksum predicate and the raising validator.

What we test:
    ✅ Known-good ISBNs, with and without hyphens
    ✅ Exactly one check digit is accepted for any 12-digit prefix
    ✅ Wrong length, non-digits, non-ASCII digits, and non-strings are rejected
    ✅ validate_isbn13 normalizes and raises ValidationError("Invalid ISBN")
"""

import pytest

from app.exceptions import ValidationError
from app.services.isbn import is_valid_isbn13, isbn13_checksum, validate_isbn13


class TestIsValidIsbn13:
    """Tests for the boolean predicate."""

    @pytest.mark.parametrize(
        "isbn",
        [
            "9780132350884",
            "978-0-13-235088-4",
            "9780306406157",
            "978-1-86197-271-2",
            "0000000000000",
        ],
    )
    def test_valid(self, isbn):
        assert is_valid_isbn13(isbn) is True

    @pytest.mark.parametrize(
        "prefix",
        ["978013235088", "979100000000", "000000000000", "123456789012", "999999999999"],
    )
    def test_exactly_one_check_digit_accepted(self, prefix):
        accepted = [d for d in "0123456789" if is_valid_isbn13(prefix + d)]
        assert accepted == [str(isbn13_checksum(prefix))]

    def test_checksum_wraps_to_zero(self):
        """A weighted sum divisible by 10 gives check digit 0, not 10."""
        # 9·1 + 7·3 + 8·1 + 2·1 = 40
        assert isbn13_checksum("978000000020") == 0
        assert is_valid_isbn13("9780000000200") is True
        assert is_valid_isbn13("9780000000201") is False

    @pytest.mark.parametrize(
        "isbn",
        [
            "",
            "978013235088",          # 12 digits
            "97801323508840",        # 14 digits
            "978013235088X",
            "9780132350885",         # bad check digit
            "978 0132350884",        # space is not stripped
            "978_0132350884",
            "٩٧٨٠١٣٢٣٥٠٨٨٤",         # Arabic-Indic digits
            "-------------",
        ],
    )
    def test_invalid(self, isbn):
        assert is_valid_isbn13(isbn) is False

    def test_non_string_rejected(self):
        assert is_valid_isbn13(9780132350884) is False
        assert is_valid_isbn13(None) is False


class TestValidateIsbn13:
    """Tests for the raising validator used by BookService."""

    def test_returns_digits_only(self):
        assert validate_isbn13("978-0-13-235088-4") == "9780132350884"
        assert validate_isbn13("9780132350884") == "9780132350884"

    def test_bad_checksum_raises(self):
        with pytest.raises(ValidationError, match="Invalid ISBN") as exc_info:
            validate_isbn13("9780132350880")
        assert exc_info.value.field == "ISBN"

    def test_bad_format_raises(self):
        with pytest.raises(ValidationError, match="Invalid ISBN"):
            validate_isbn13("not-an-isbn")
