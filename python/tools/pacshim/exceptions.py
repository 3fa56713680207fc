#!/usr/bin/env python3
"""
Exception types for pacshim.
Every error carries the exit code the CLI returns for it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Context information attached to a pacshim error."""

    timestamp: float = field(default_factory=time.time)
    host: Optional[str] = None
    operation: Optional[str] = None
    command: List[str] = field(default_factory=list)
    additional_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timestamp": self.timestamp,
            "host": self.host,
            "operation": self.operation,
            "command": self.command,
            "additional_data": self.additional_data,
        }


class PacshimError(Exception):
    """Base exception for all pacshim errors."""

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: Optional[ErrorContext] = None,
        **extra_context: Any,
    ):
        super().__init__(message)
        self.context = context or ErrorContext()
        self.extra_context = extra_context

        if extra_context:
            self.context.additional_data.update(extra_context)

    @property
    def error_code(self) -> str:
        return self.__class__.__name__.upper()

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "error_code": self.error_code,
            "exit_code": self.exit_code,
            "context": self.context.to_dict(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={str(self)!r}, exit_code={self.exit_code})"


class ConflictingPrimaryOperationError(PacshimError):
    """Raised when two different primary operations are requested."""

    def __init__(self, current: str, requested: str, **kwargs: Any):
        self.current = current
        self.requested = requested
        super().__init__(
            f"only one operation may be used at a time (-{current} and -{requested})",
            current=current,
            requested=requested,
            **kwargs,
        )


class MissingDependencyError(PacshimError):
    """Raised when a companion tool required by an option is absent."""

    def __init__(self, message: str, dependency: str, **kwargs: Any):
        self.dependency = dependency
        super().__init__(message, dependency=dependency, **kwargs)


class UnsupportedHostError(PacshimError):
    """Raised when no supported package manager could be detected."""

    def __init__(self, message: str = "no supported package manager detected", **kwargs: Any):
        super().__init__(message, **kwargs)


class UnsupportedOperationError(PacshimError):
    """Diagnostic for an operation that the detected host cannot perform."""

    def __init__(self, operation: str, host: str, **kwargs: Any):
        self.operation = operation
        self.host = host
        super().__init__(
            f"-{operation}: function not implemented on this system ({host})",
            context=ErrorContext(host=host, operation=operation),
            **kwargs,
        )


class MissingRequiredArgumentError(PacshimError):
    """Raised when an operation that needs targets is given none."""

    def __init__(self, operation: str, **kwargs: Any):
        self.operation = operation
        super().__init__(
            f"-{operation}: no targets specified",
            context=ErrorContext(operation=operation),
            **kwargs,
        )


class MixedScopeRequestError(PacshimError):
    """Raised when package names are mixed with a whole-system operation."""

    def __init__(self, operation: str, packages: List[str], **kwargs: Any):
        self.operation = operation
        self.packages = packages
        super().__init__(
            f"-{operation} cannot be combined with package names; "
            f"run 'pacshim -{operation}' and 'pacshim -S {' '.join(packages)}' separately",
            context=ErrorContext(operation=operation),
            packages=packages,
            **kwargs,
        )


class NoOperationError(PacshimError):
    """Raised when no primary operation was given."""

    def __init__(self, **kwargs: Any):
        super().__init__("no operation specified (use -h for help)", **kwargs)


class ConfigError(PacshimError):
    """Raised when the environment configuration is invalid."""
    pass


class CommandError(PacshimError):
    """Raised when a native command cannot be started at all."""

    exit_code = 127

    def __init__(self, command: List[str], reason: str, **kwargs: Any):
        self.command = command
        self.reason = reason
        super().__init__(
            f"failed to execute {' '.join(command)}: {reason}",
            context=ErrorContext(command=list(command)),
            **kwargs,
        )
