"""
Book Catalog Backend — ISBN-13 Checksum Validation
===================================================

What:  Pure functions that check an ISBN-13 and return its normalized form.
How:   Strip hyphens, require 13 decimal digits, compare the last digit with
       the mod-10 weighted checksum of the first twelve (weights 1,3,1,3,...).
Who:   Called by BookService.create_book before any database access.

Example:
    978-0-13-235088-4 → 9780132350884
    sum = 9·1 + 7·3 + 8·1 + 0·3 + 1·1 + 3·3 + 2·1 + 3·3 + 5·1 + 0·3 + 8·1 + 8·3 = 96
    checksum = (10 - 96 % 10) % 10 = 4 ✓
"""

import re

from app.exceptions import ValidationError

# ASCII digits only; str.isdigit() also accepts superscripts and other scripts
_ISBN13_PATTERN = re.compile(r"[0-9]{13}")


def isbn13_checksum(first_twelve: str) -> int:
    """Check digit for the first twelve digits of an ISBN-13."""
    total = sum(
        int(digit) * (1 if index % 2 == 0 else 3)
        for index, digit in enumerate(first_twelve[:12])
    )
    return (10 - (total % 10)) % 10


def is_valid_isbn13(isbn: str) -> bool:
    """True when `isbn` (hyphens allowed) is a checksum-valid ISBN-13."""
    if not isinstance(isbn, str):
        return False
    digits = isbn.replace("-", "")
    if not _ISBN13_PATTERN.fullmatch(digits):
        return False
    return isbn13_checksum(digits[:12]) == int(digits[12])


def validate_isbn13(isbn: str) -> str:
    """
    Validate an ISBN-13 and return it without hyphens.

    Raises:
        ValidationError: wrong length, non-digit characters, or bad check digit (→ 400)
    """
    if not is_valid_isbn13(isbn):
        raise ValidationError(message="Invalid ISBN", field="ISBN")
    return isbn.replace("-", "")
