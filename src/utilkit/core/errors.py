"""InvalidArgumentError — the single failure kind raised by validated helpers.

INVARIANT: Every precondition violation is raised through
:func:`invalid_argument`, so the message format never drifts between
call sites. The check always runs before any computation or side effect.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from utilkit.core.types import kind_of


class ArgumentReport(BaseModel):
    """Structured, serializable view of an invalid-argument failure."""

    model_config = {"frozen": True}

    function_name: str
    expected: str
    received: str
    received_kind: str


class InvalidArgumentError(TypeError):
    """A helper received an argument outside its contract.

    Attributes:
        function_name: Name of the helper that rejected the argument.
        expected: Human-readable description of the accepted shape.
        received: The offending value itself.
        received_kind: ``"null"`` for ``None``, otherwise the runtime type name.
    """

    def __init__(self, function_name: str, expected: str, received: Any) -> None:
        self.function_name = function_name
        self.expected = expected
        self.received = received
        self.received_kind = kind_of(received)
        super().__init__(f"{function_name}(): expected {expected}, but received {self.received_kind}")

    def report(self) -> ArgumentReport:
        return ArgumentReport(
            function_name=self.function_name,
            expected=self.expected,
            received=repr(self.received),
            received_kind=self.received_kind,
        )


def invalid_argument(function_name: str, expected: str, received: Any) -> InvalidArgumentError:
    """Build the error for a failed precondition. Callers ``raise`` the result."""
    return InvalidArgumentError(function_name, expected, received)


def require(condition: bool, function_name: str, expected: str, received: Any) -> None:
    """Raise :class:`InvalidArgumentError` unless *condition* holds."""
    if not condition:
        raise invalid_argument(function_name, expected, received)
