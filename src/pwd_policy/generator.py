"""
Rejection-sampling password generator and the policy checks it relies on.

A candidate is drawn uniformly from an alphabet derived from the enabled rules
and thrown away until it passes :func:`validate`. The alphabet only guarantees
that every required class *can* appear, so short passwords may need several
draws before one satisfies all rules.
"""

import logging
import random
import re
import string
from dataclasses import dataclass
from enum import StrEnum

from typing_extensions import override

from .dto.policy import PolicyConfiguration, PolicyRule
from .exc import UnsatisfiablePolicyError

__all__ = (
    "DEFAULT_MAX_ATTEMPTS",
    "SPECIAL_CHARACTERS",
    "Invalid",
    "Valid",
    "ValidationResult",
    "Violation",
    "build_alphabet",
    "generate",
    "generate_unconstrained",
    "validate",
)


logger = logging.getLogger(__name__)

SPECIAL_CHARACTERS = "~!@#$%^&*()-_=+[]{};:,.<>/?"
DEFAULT_MAX_ATTEMPTS = 10_000

_DIGIT_RE = re.compile(r"[0-9]")
# underscore is a word character but still counts as special
_SPECIAL_RE = re.compile(r"[_\W]", re.ASCII)
# strtolower-style folding: non-ASCII letters are left untouched
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Violation(StrEnum):
    TOO_SHORT = "too-short"
    MISSING_MIXED_CASE = "missing-mixed-case"
    MISSING_NUMBER = "missing-number"
    MISSING_SPECIAL = "missing-special"


_MESSAGES = {
    Violation.TOO_SHORT: "New password must contain at least {length} characters.",
    Violation.MISSING_MIXED_CASE: (
        "New password must contain both uppercase and lowercase characters."
    ),
    Violation.MISSING_NUMBER: "New password must contain numbers.",
    Violation.MISSING_SPECIAL: "New password must contain special characters.",
}


@dataclass(frozen=True, slots=True)
class Valid:
    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    reason: Violation
    message: str

    def __bool__(self) -> bool:
        return False

    @override
    def __str__(self) -> str:
        return self.message


ValidationResult = Valid | Invalid


def _invalid(reason: Violation, config: PolicyConfiguration) -> Invalid:
    return Invalid(
        reason=reason,
        message=_MESSAGES[reason].format(length=config.get_password_len()),
    )


def build_alphabet(config: PolicyConfiguration) -> str:
    alphabet = string.ascii_lowercase

    if config.is_policy_enabled(PolicyRule.MIXED_CASE):
        alphabet += string.ascii_uppercase
    if config.is_policy_enabled(PolicyRule.NUMBERS):
        alphabet += string.digits
    if config.is_policy_enabled(PolicyRule.SPECIAL):
        alphabet += SPECIAL_CHARACTERS

    return alphabet


def validate(password: str, config: PolicyConfiguration) -> ValidationResult:
    """
    Check ``password`` against ``config`` and report the first rule it breaks.

    The checks run in a fixed order (length, mixed case, numbers, special) and stop
    at the first failure. The mixed case check only folds ASCII letters and only
    rejects input that folding leaves unchanged, so an all-uppercase password passes
    it while "Éééé" does not.
    """
    min_length = config.get_password_len()

    if min_length != 0 and len(password) < min_length:
        return _invalid(Violation.TOO_SHORT, config)

    if config.is_policy_enabled(PolicyRule.MIXED_CASE) and (
        password.translate(_ASCII_LOWER) == password
    ):
        return _invalid(Violation.MISSING_MIXED_CASE, config)

    if config.is_policy_enabled(PolicyRule.NUMBERS) and not _DIGIT_RE.search(
        password
    ):
        return _invalid(Violation.MISSING_NUMBER, config)

    if config.is_policy_enabled(PolicyRule.SPECIAL) and not _SPECIAL_RE.search(
        password
    ):
        return _invalid(Violation.MISSING_SPECIAL, config)

    return Valid()


def generate(
    length: int,
    config: PolicyConfiguration,
    *,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Draw random passwords of ``length`` characters until one satisfies ``config``.

    Args:
        length: Number of characters in the result.
        config: Policy the result must satisfy.
        rng: Source of randomness, a fresh :class:`random.Random` if omitted.
        max_attempts: Upper bound on the number of candidates. ``0`` removes the
            bound, in which case an unsatisfiable policy loops forever.

    Raises:
        UnsatisfiablePolicyError: No candidate passed within ``max_attempts``.
    """
    if length < 0:
        raise ValueError("length must be non-negative, got %d" % length)
    if max_attempts < 0:
        raise ValueError("max_attempts must be non-negative, got %d" % max_attempts)

    rng = rng or random.Random()
    alphabet = build_alphabet(config)

    attempts = 0
    while not max_attempts or attempts < max_attempts:
        attempts += 1
        candidate = "".join(rng.choices(alphabet, k=length))

        if validate(candidate, config):
            logger.debug(
                "generated %d-character password after %d attempt(s)",
                length,
                attempts,
            )
            return candidate

    logger.warning(
        "no %d-character password satisfied %r within %d attempt(s)",
        length,
        config,
        attempts,
    )
    raise UnsatisfiablePolicyError(
        "Password length {ctx[length]} may be too short for the enabled rules.",
        ctx=UnsatisfiablePolicyError.Context(
            policy=config, length=length, attempts=attempts
        ),
    )


def generate_unconstrained(length: int, *, rng: random.Random | None = None) -> str:
    """Draw a password from every character class without checking any policy."""
    if length < 0:
        raise ValueError("length must be non-negative, got %d" % length)

    rng = rng or random.Random()
    alphabet = build_alphabet(
        PolicyConfiguration(rules=frozenset(PolicyRule)),
    )
    return "".join(rng.choices(alphabet, k=length))
