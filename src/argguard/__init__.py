"""argguard: runtime argument and shape validation for Python callables.

Wrap a function with per-argument expectations and every argument is checked
before the call. All failures are collected and reported together in a single
``ValidationError``, never just the first one.
"""

import logging

from argguard.boundary import render_failure, unwrap
from argguard.composer import CurriedValidator, compose, declared_arity
from argguard.config import (
    ArgGuardSettings,
    current_settings,
    resolve_settings,
    settings_scope,
)
from argguard.core.kinds import Kind, kind_of
from argguard.core.outcomes import combine_all
from argguard.core.types import (
    MISSING,
    Failure,
    FailureDescriptor,
    FailureKind,
    NamedExpectation,
    Outcome,
    Predicate,
    Success,
)
from argguard.exceptions import (
    ArgGuardError,
    ArityMismatchError,
    InvariantViolationError,
    ValidationError,
)
from argguard.functions import validated, wrap_with_validation
from argguard.predicates import conforms_to
from argguard.props import validate_props
from argguard.scope import merge_scope

__version__ = "0.1.0"

# Library loggers stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Entry points
    "wrap_with_validation",
    "validated",
    "validate_props",
    "merge_scope",
    "conforms_to",
    # Composition
    "compose",
    "combine_all",
    "unwrap",
    "render_failure",
    "declared_arity",
    "CurriedValidator",
    # Types
    "Kind",
    "kind_of",
    "Success",
    "Failure",
    "Outcome",
    "FailureDescriptor",
    "FailureKind",
    "NamedExpectation",
    "Predicate",
    "MISSING",
    # Errors
    "ArgGuardError",
    "ValidationError",
    "ArityMismatchError",
    "InvariantViolationError",
    # Configuration
    "ArgGuardSettings",
    "current_settings",
    "resolve_settings",
    "settings_scope",
]
