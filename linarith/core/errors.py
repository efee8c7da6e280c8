"""
Library exceptions.

Every failure raised by linarith derives from LinarithError and also from the
builtin exception a caller would naturally expect, so ``except ValueError``
keeps working for code that does not know about this package.
"""

from typing import Any, Dict, Optional


class LinarithError(Exception):
    """Base exception for linarith errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ShapeMismatchError(LinarithError, ValueError):
    """Raised when matrix dimensions are incompatible for an operation"""

    def __init__(
        self,
        message: str,
        shape: Optional[tuple[int, int]] = None,
        other_shape: Optional[tuple[int, int]] = None,
    ):
        details: Dict[str, Any] = {}
        if shape is not None:
            details["shape"] = shape
        if other_shape is not None:
            details["other_shape"] = other_shape
        super().__init__(message=message, details=details)


class OutOfRangeError(LinarithError, IndexError):
    """Raised for row, column or linear index access outside a matrix"""

    def __init__(self, kind: str, value: int, bound: int):
        super().__init__(
            message=f"{kind}: {value} (valid range 0..{bound - 1})" if bound > 0
            else f"{kind}: {value} (matrix is empty)",
            details={"kind": kind, "value": value, "bound": bound},
        )


class UnsupportedOperationError(LinarithError, NotImplementedError):
    """Raised when an arithmetic has no valid definition for an operation"""

    def __init__(self, operation: str, arithmetic: Optional[str] = None, reason: Optional[str] = None):
        message = f"'{operation}' is not supported"
        if arithmetic:
            message += f" by {arithmetic}"
        if reason:
            message += f": {reason}"
        details = {"operation": operation}
        if arithmetic:
            details["arithmetic"] = arithmetic
        super().__init__(message=message, details=details)
