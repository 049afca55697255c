"""Exceptions raised at the argguard boundary."""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from argguard.core.types import FailureDescriptor


class ArgGuardError(Exception):
    """Base exception for argguard errors."""


class ValidationError(ArgGuardError):
    """Raised when one or more arguments or properties fail validation.

    The message joins every rendered failure, in declaration order. The
    structured descriptors and the stack-free messages are kept on the
    exception so tests can assert on causes rather than parse text.
    """

    def __init__(
        self,
        message: str,
        failures: tuple[FailureDescriptor, ...] = (),
        messages: tuple[str, ...] = (),
    ) -> None:
        """Initialize the aggregate validation error.

        Args:
            message: All rendered failures joined by the configured separator.
            failures: The descriptors that produced the message.
            messages: Human-readable text per failure, without stack text.
        """
        super().__init__(message)
        self.failures = failures
        self.messages = messages


class ArityMismatchError(ValidationError):
    """Raised when declared arity, expectations and supplied arguments disagree."""


class InvariantViolationError(ArgGuardError):
    """Raised when the validation engine breaks one of its own invariants."""
