"""
Result - success/failure flag carried together with a payload

Used as a return-value convention for expected failure paths, where raising
an exception would be too heavy for the caller.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """
    Operation outcome paired with its product.

    Constructed positionally like ``Result()``, ``Result(data)`` or
    ``Result(data, True)``; the flag defaults to ``False``.
    """
    data: Optional[T] = None
    result: bool = False
    message: Optional[str] = None

    def get_data(self) -> Optional[T]:
        return self.data

    def get_message(self) -> Optional[str]:
        return self.message

    def get_result(self) -> bool:
        return self.result

    def is_success(self) -> bool:
        return self.get_result()

    def is_error(self) -> bool:
        return not self.get_result()

    def set_data(self, data: Optional[T]) -> "Result[T]":
        self.data = data
        return self

    def set_message(self, message: Optional[str]) -> "Result[T]":
        self.message = message
        return self

    def set_result(self, result: bool) -> bool:
        """
        Set the success flag.

        Unlike the other setters this is not chainable: it returns the
        flag value held *before* the call.

        Args:
            result: New flag value

        Returns:
            Previous flag value
        """
        previous = self.result
        self.result = result
        return previous

    def __str__(self) -> str:
        return f"Result [data={self.data}, result={self.result}, message={self.message}]"

    @classmethod
    def success(cls, data: Optional[T]) -> "Result[T]":
        """Build a successful result holding ``data``."""
        return cls(data, True)

    @classmethod
    def error(cls, message: Optional[str]) -> "Result[T]":
        """Build a failed result with ``message`` and no data."""
        return cls().set_message(message)
