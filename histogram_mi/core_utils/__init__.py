"""Input validation shared by every formula."""

from .data_utils import (
    EmptyInputError,
    LengthMismatchError,
    as_vector,
    check_log_base,
    check_vectors,
)

__all__ = [
    "EmptyInputError",
    "LengthMismatchError",
    "as_vector",
    "check_log_base",
    "check_vectors",
]
