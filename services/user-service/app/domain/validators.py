"""
Validation rules for personal data.

Pure predicates for the Brazilian taxpayer ID (CPF) and email addresses.
"""

import re
from typing import Optional

import email_validator
from email_validator import EmailNotValidError, validate_email

CPF_PATTERN = re.compile(r"^[0-9]{11}$")

# Reserved names such as localhost and .local are valid address grammar.
email_validator.SPECIAL_USE_DOMAIN_NAMES[:] = []


def _cpf_check_digit(digits: list[int]) -> int:
    """Compute one CPF check digit from the digits preceding it."""
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    remainder = total * 10 % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(value: Optional[str]) -> bool:
    """
    Check a CPF number.

    The value must be exactly 11 digits, not a single repeated digit, and
    carry both check digits.

    Args:
        value: Candidate CPF

    Returns:
        True if the CPF is well formed
    """
    if not value or not CPF_PATTERN.match(value):
        return False

    digits = [int(c) for c in value]
    if len(set(digits)) == 1:
        return False

    if _cpf_check_digit(digits[:9]) != digits[9]:
        return False
    return _cpf_check_digit(digits[:10]) == digits[10]


def is_valid_email(value: Optional[str]) -> bool:
    """
    Check an email address with strict address grammar.

    The parsed canonical address must match the trimmed input, ignoring case,
    so display-name forms and addresses the parser rewrites are rejected.

    Args:
        value: Candidate email address

    Returns:
        True if the address is valid
    """
    if value is None or not value.strip():
        return False

    email = value.strip()
    try:
        parsed = validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError:
        return False

    return parsed.normalized.lower() == email.lower()
