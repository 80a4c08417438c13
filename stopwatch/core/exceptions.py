"""Custom exceptions used throughout the stopwatch package."""

from typing import Any, Optional


class StopwatchError(Exception):
    """Base exception for all stopwatch model errors.

    All package-specific exceptions should inherit from this class.
    This allows catching all model errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(StopwatchError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing required configuration
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class SignalError(StopwatchError):
    """Base exception for signal misuse.

    Raised when a caller drives or looks up a signal incorrectly. Normal
    hardware behaviour (counting, wrapping, blank digits) never raises.
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if name is not None:
            details = details or {}
            details["signal"] = name

        super().__init__(message=message, details=details)
        self.name = name


class UnknownSignalError(SignalError):
    """Raised when a signal name is not part of a design.

    Examples:
    - Reading "minutes" from the stopwatch
    - Pressing a button that is not an input port
    """

    def __init__(
        self,
        name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Unknown signal '{name}'"
        super().__init__(message=message, name=name, details=details)


class SignalWidthError(SignalError):
    """Raised when a value does not fit in a signal's bit width."""

    def __init__(
        self,
        name: str,
        value: int,
        width: int,
        details: Optional[dict[str, Any]] = None,
    ):
        message = (
            f"Value {value} does not fit signal '{name}' "
            f"of width {width} bits"
        )
        super().__init__(message=message, name=name, details=details)
        self.value = value
        self.width = width


class DesignError(StopwatchError, ValueError):
    """Raised when a design cannot be found or created by name."""

    def __init__(
        self,
        name: str,
        available: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        available = available or []
        message = f"Unknown design '{name}'. Available: {available}"
        super().__init__(message=message, details=details)
        self.design_name = name
        self.available = available
