"""Result types for railway-oriented programming.

Store operations and handlers return a Result instead of raising, so every
failure path (not found, duplicate email, access denied) is visible in the
signature and easy to assert on in tests.

Usage:
    def find_company(company_id: UUID) -> Result[Company, NotFoundError]:
        company = companies.get(company_id)
        if company is None:
            return Failure(error=NotFoundError(...))
        return Success(value=company)

    match find_company(company_id):
        case Success(value=company):
            print(company.name)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
