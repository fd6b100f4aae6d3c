"""
Custom exception hierarchy for irriflow.
Separates fatal input-shape problems from configuration and calculation errors.
"""
from typing import Optional, Any, Dict
from dataclasses import dataclass


@dataclass
class ErrorContext:
    """Context information for errors"""
    plot: Optional[str] = None
    date: Optional[str] = None
    component: Optional[str] = None
    operation: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class IrriflowError(Exception):
    """Base exception for all irriflow errors"""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        context_str = ""
        if self.context.plot:
            context_str += f" [Plot: {self.context.plot}]"
        if self.context.date:
            context_str += f" [Date: {self.context.date}]"
        if self.context.component:
            context_str += f" [Component: {self.context.component}]"

        return f"{self.__class__.__name__}: {self.message}{context_str}"


# Data-related errors
class DataError(IrriflowError):
    """Base class for data-related errors"""
    pass


class DataSourceError(DataError):
    """Input table could not be read or written"""
    pass


class MissingColumnError(DataError):
    """A required input column is absent"""

    def __init__(self, missing, context: Optional[ErrorContext] = None):
        self.missing = list(missing)
        super().__init__(
            f"Missing required column(s): {', '.join(self.missing)}", context
        )


class DataValidationError(DataError):
    """Input values could not be interpreted (e.g. text in a numeric column)"""
    pass


# Configuration errors
class ConfigurationError(IrriflowError):
    """Configuration error"""
    pass


def handle_exception(exc: Exception, context: Optional[ErrorContext] = None) -> IrriflowError:
    """
    Wrap generic exceptions in the IrriflowError hierarchy.
    Useful for catching and categorizing pandas and I/O exceptions.
    """
    if isinstance(exc, IrriflowError):
        return exc

    error_map = {
        FileNotFoundError: DataSourceError,
        PermissionError: DataSourceError,
        OSError: DataSourceError,
        ValueError: DataValidationError,
        TypeError: DataValidationError,
        KeyError: DataValidationError,
    }

    for exc_type, irriflow_exc_type in error_map.items():
        if isinstance(exc, exc_type):
            return irriflow_exc_type(str(exc), context)

    return IrriflowError(str(exc), context)
