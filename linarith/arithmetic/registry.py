"""
Named arithmetic instances.

Arithmetics are stateless (or only carry a configuration such as the decimal
precision), so one shared instance per name is handed out.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ..core.config import get_settings
from ..core.errors import UnsupportedOperationError
from ..core.logging import get_logger
from .base import AbstractArithmetic
from .complex_numbers import ComplexArithmetic
from .numeric import DecimalArithmetic, FloatArithmetic, IntegerArithmetic
from .rational import FractionArithmetic
from .symbolic import SymPyArithmetic

logger = get_logger(__name__)

_factories: Dict[str, Callable[[], AbstractArithmetic]] = {
    FloatArithmetic.name: FloatArithmetic,
    IntegerArithmetic.name: IntegerArithmetic,
    DecimalArithmetic.name: DecimalArithmetic,
    FractionArithmetic.name: FractionArithmetic,
    ComplexArithmetic.name: ComplexArithmetic,
    SymPyArithmetic.name: SymPyArithmetic,
}
_instances: Dict[str, AbstractArithmetic] = {}


def get_arithmetic(name: Optional[str] = None) -> AbstractArithmetic:
    """
    Get the shared arithmetic registered under ``name``.

    Args:
        name: Arithmetic name (None = ``DEFAULT_ARITHMETIC`` from settings)

    Returns:
        The arithmetic instance

    Raises:
        UnsupportedOperationError: If no arithmetic is registered under ``name``

    Examples:
        >>> get_arithmetic('fraction').quotient(Fraction(1), Fraction(3))
        Fraction(1, 3)
    """
    key = (name or get_settings().DEFAULT_ARITHMETIC).lower()
    if key not in _instances:
        factory = _factories.get(key)
        if factory is None:
            raise UnsupportedOperationError(
                "get_arithmetic",
                reason=f"unknown arithmetic '{key}', expected one of {available_arithmetics()}",
            )
        _instances[key] = factory()
        logger.debug("Created arithmetic %r for '%s'", _instances[key], key)
    return _instances[key]


def register_arithmetic(name: str, factory: Callable[[], AbstractArithmetic]) -> None:
    """Register (or replace) a custom arithmetic under ``name``."""
    key = name.lower()
    _factories[key] = factory
    _instances.pop(key, None)


def available_arithmetics() -> List[str]:
    """Names accepted by get_arithmetic()."""
    return sorted(_factories)


def clear_arithmetic_cache() -> None:
    """Drop shared instances, e.g. after the decimal settings changed."""
    _instances.clear()
