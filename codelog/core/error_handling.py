"""
Error handling utilities for codelog.

This module provides the exception hierarchy used by the host-facing layers
(configuration loading, workspace access, the command line) and a decorator
for best-effort helpers that must degrade to an empty result. The snippet
and locator engines themselves never raise on malformed input.
"""
import functools
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger('codelog')

class CodeLogError(Exception):
    """Base class for all codelog exceptions.

    Extra keyword arguments are collected into a context dictionary that is
    rendered alongside the message.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.get('context') or {})

        for key, value in kwargs.items():
            if key != 'context':
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    def __str__(self) -> str:
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Configuration Errors =====

class ConfigurationError(CodeLogError):
    """Exception raised for issues with configuration settings."""
    pass

class MissingConfigurationError(ConfigurationError):
    """Exception raised when a configuration file cannot be found."""
    def __init__(self, setting: str, **kwargs):
        message = f"Configuration '{setting}' is missing"
        super().__init__(message, setting=setting, **kwargs)

class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value}. Reason: {reason}"
        super().__init__(message, setting=setting, value=value, reason=reason, **kwargs)
        self.setting = setting
        self.reason = reason

# ===== Language Support Errors =====

class UnsupportedLanguageError(CodeLogError):
    """Exception raised when an operation is attempted with an unsupported language."""
    def __init__(self, language: str, operation: Optional[str] = None, **kwargs):
        message = f"Unsupported language: '{language}'"
        if operation:
            message += f" for operation: {operation}"
        super().__init__(message, language=language, operation=operation, **kwargs)
        self.language = language
        self.operation = operation

# ===== Manipulation Errors =====

class ManipulationError(CodeLogError):
    """Exception raised when a document edit cannot be applied."""
    pass

class WriteConflictError(ManipulationError):
    """Raised when a file changed on disk since its content was read."""

    def __init__(self, expected_hash: str, actual_hash: str, **kwargs):
        message = (
            f"Write conflict: expected hash {expected_hash} but found {actual_hash}"
        )
        super().__init__(message, expected_hash=expected_hash, actual_hash=actual_hash, **kwargs)
        self.expected_hash = expected_hash
        self.actual_hash = actual_hash

# ===== File Access Errors =====

class FileAccessError(CodeLogError):
    """Exception raised when a source file cannot be read or written."""
    def __init__(self, path: str, reason: str, **kwargs):
        message = f"Cannot access '{path}': {reason}"
        super().__init__(message, path=path, reason=reason, **kwargs)
        self.path = path
        self.reason = reason

# ===== Utility Decorators =====

def handle_core_errors(default_factory: Callable[[], Any]) -> Callable:
    """
    Decorator for best-effort helpers: log the failure and return an empty result.

    ``CodeLogError`` subclasses are logged at warning level, anything else is
    logged with its traceback. In both cases ``default_factory()`` is returned.

    Args:
        default_factory: Callable producing the empty result (``list``, ``str``...)

    Returns:
        Decorator wrapping the function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CodeLogError as e:
                logger.warning(f"{func.__name__} failed: {str(e)}")
                return default_factory()
            except Exception as e:
                logger.exception(f"Unexpected error during {func.__name__}: {str(e)}")
                return default_factory()
        return wrapper
    return decorator
