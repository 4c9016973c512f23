__all__ = (
    "dto",
    "exc",
    "PolicyConfiguration",
    "PolicyRule",
    "PasswordService",
    "Invalid",
    "Valid",
    "ValidationResult",
    "Violation",
    "build_alphabet",
    "generate",
    "generate_unconstrained",
    "validate",
)
__version__ = "0.1.0"

from . import dto, exc
from .dto.policy import PolicyConfiguration, PolicyRule
from .generator import (
    Invalid,
    Valid,
    ValidationResult,
    Violation,
    build_alphabet,
    generate,
    generate_unconstrained,
    validate,
)
from .service import PasswordService
