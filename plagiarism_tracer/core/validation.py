"""
Input validation and error handling for the Plagiarism Tracer.

The matching engine itself accepts any pair of strings; the checks here only
guard argument types at the public entry points, the caller-side size limit,
and the files the command line reads.
"""

import inspect
import logging
from functools import wraps
from pathlib import Path
from typing import Any, Optional, Union


# Custom Exception Classes
class ValidationError(Exception):
    """Base class for validation errors."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class ParameterValidationError(ValidationError):
    """Exception raised for parameter validation errors."""
    pass


class FileValidationError(ValidationError):
    """Exception raised when an input document cannot be read."""
    pass


class InputSizeError(ValidationError):
    """Exception raised when a document exceeds the configured word limit."""
    pass


class AnalysisCancelledError(Exception):
    """Raised when the caller asks a running analysis to stop."""

    def __init__(self, windows_processed: int):
        self.windows_processed = windows_processed
        super().__init__(f"Analysis cancelled after {windows_processed} windows")


# Validation Utilities
class FileValidator:
    """Checks for the plain-text documents read by the command line."""

    ALLOWED_TEXT_EXTENSIONS = {'.txt', '.md', '.text', ''}
    MAX_FILE_SIZE_MB = 10

    @staticmethod
    def validate_text_file(file_path: Union[str, Path],
                           max_size_mb: Optional[float] = None) -> Path:
        """
        Validate a document path before reading it.

        Args:
            file_path: Path to the document
            max_size_mb: Maximum file size in MB

        Returns:
            Path object

        Raises:
            FileValidationError: If validation fails
        """
        if not file_path:
            raise FileValidationError("File path cannot be empty", field="file_path", value=file_path)

        path = Path(file_path)

        if not path.exists():
            raise FileValidationError(f"File does not exist: {file_path}", field="file_path", value=file_path)

        if not path.is_file():
            raise FileValidationError(f"Path is not a file: {file_path}", field="file_path", value=file_path)

        if path.suffix.lower() not in FileValidator.ALLOWED_TEXT_EXTENSIONS:
            raise FileValidationError(
                f"File extension not allowed. Allowed: {sorted(FileValidator.ALLOWED_TEXT_EXTENSIONS)}, got: {path.suffix}",
                field="file_path",
                value=file_path
            )

        max_size_mb = max_size_mb or FileValidator.MAX_FILE_SIZE_MB
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > max_size_mb:
            raise FileValidationError(
                f"File too large: {size_mb:.1f}MB (max: {max_size_mb}MB)",
                field="file_path",
                value=file_path
            )

        return path


class ParameterValidator:
    """Parameter validation utilities."""

    @staticmethod
    def validate_integer(value: Any, field: str, min_value: Optional[int] = None,
                         max_value: Optional[int] = None) -> int:
        """Validate an integer parameter, coercing numeric strings."""
        if isinstance(value, bool):
            raise ParameterValidationError(
                f"{field} must be an integer, got bool",
                field=field,
                value=value
            )
        if not isinstance(value, int):
            if isinstance(value, float) and not value.is_integer():
                raise ParameterValidationError(
                    f"{field} must be a whole number, got {value}",
                    field=field,
                    value=value
                )
            try:
                value = int(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be an integer, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if min_value is not None and value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return value

    @staticmethod
    def validate_positive_integer(value: Any, field: str, min_value: int = 1,
                                  max_value: Optional[int] = None) -> int:
        """Validate positive integer parameter."""
        return ParameterValidator.validate_integer(value, field, min_value=min_value, max_value=max_value)

    @staticmethod
    def validate_window_size(value: Any, field: str = "window_size") -> int:
        """
        Any integer is a valid window size; values below 2 end up selecting
        single-word matching once clamped.
        """
        return ParameterValidator.validate_integer(value, field)

    @staticmethod
    def validate_text(value: Any, field: str) -> str:
        """Validate a document text. ``None`` is treated as an empty document."""
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ParameterValidationError(
                f"{field} must be a string, got {type(value).__name__}",
                field=field,
                value=value
            )
        return value

    @staticmethod
    def validate_word_limit(word_count: int, field: str, max_words: Optional[int]) -> int:
        """Reject documents longer than ``max_words`` (no limit when None or 0)."""
        if max_words and word_count > max_words:
            raise InputSizeError(
                f"{field} has {word_count} words (max: {max_words})",
                field=field,
                value=word_count
            )
        return word_count


# Decorators for validation
def validate_inputs(**validators):
    """
    Decorator to validate function inputs.

    Args:
        **validators: Dict mapping parameter names to validation functions
    """
    def decorator(func):
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            # Validate each parameter
            for param_name, validator in validators.items():
                if param_name in bound_args.arguments:
                    value = bound_args.arguments[param_name]
                    try:
                        validated_value = validator(value)
                        bound_args.arguments[param_name] = validated_value
                    except ValidationError:
                        raise
                    except Exception as e:
                        raise ParameterValidationError(
                            f"Validation failed for {param_name}: {str(e)}",
                            field=param_name,
                            value=value
                        )

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator


def handle_exceptions(default_return=None, reraise_types=None):
    """
    Decorator to handle exceptions gracefully.

    Args:
        default_return: Default value to return on exception
        reraise_types: List of exception types to re-raise
    """
    if reraise_types is None:
        reraise_types = [ValidationError, AnalysisCancelledError]

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except tuple(reraise_types):
                raise
            except Exception as e:
                logger = logging.getLogger(func.__module__)
                logger.error(f"Unhandled exception in {func.__name__}: {str(e)}", exc_info=True)

                if default_return is not None:
                    return default_return
                raise
        return wrapper
    return decorator
