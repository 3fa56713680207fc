#!/usr/bin/env python3
"""
Checks applied to a parsed request before anything is dispatched.
"""

from __future__ import annotations

from .exceptions import MissingRequiredArgumentError, MixedScopeRequestError, NoOperationError
from .models import ParsedRequest

# Whole-system operations ignore or misinterpret package names depending on the
# native tool, so targets are rejected outright.
WHOLE_SYSTEM_OPERATIONS = frozenset({"Su", "Sy", "Suy"})

TARGETS_REQUIRED = frozenset({"S", "R", "U", "Qo", "Qp"})


def validate(request: ParsedRequest) -> None:
    """
    Reject requests that must not reach a native package manager.

    Raises:
        MixedScopeRequestError: Packages given with a whole-system operation
        NoOperationError: No primary operation was given
        MissingRequiredArgumentError: An operation that needs targets got none
    """
    operation = request.operation

    if request.packages and operation in WHOLE_SYSTEM_OPERATIONS:
        raise MixedScopeRequestError(operation, list(request.packages))

    if request.primary is None:
        raise NoOperationError()

    if not request.packages and operation in TARGETS_REQUIRED:
        raise MissingRequiredArgumentError(operation)
