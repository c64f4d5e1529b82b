"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator library for RFC-compliant validation. The whole
    address is lowercased so the users.email unique constraint is
    effectively case-insensitive.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("A@Acme.com"))
        'a@acme.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize email.

        Raises:
            ValueError: If email format is invalid.
        """
        try:
            # No deliverability check (no DNS lookups on the request path)
            validated = validate_email(self.value, check_deliverability=False)
            object.__setattr__(self, "value", validated.normalized.lower())
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
