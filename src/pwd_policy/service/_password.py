import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

from .. import generator
from ..dto.policy import PolicyConfiguration, PolicyRule

logger = logging.getLogger(__name__)


class PolicySource(Protocol):
    def get_password_len(self) -> int: ...

    def is_policy_enabled(self, rule: PolicyRule) -> bool: ...


def snapshot_policy(source: PolicySource) -> PolicyConfiguration:
    if isinstance(source, PolicyConfiguration):
        return source

    return PolicyConfiguration(
        password_length=source.get_password_len(),
        rules=frozenset(rule for rule in PolicyRule if source.is_policy_enabled(rule)),
    )


@dataclass(slots=True)
class PasswordService:
    """
    Applies the password policy to passwords handed out by a host application.

    Without a policy source every password passes through untouched. Password
    resets always bypass the policy.
    """

    source: PolicySource | None = None
    max_attempts: int = generator.DEFAULT_MAX_ATTEMPTS
    rng: random.Random = field(default_factory=random.Random)

    def random_password(self, password: str) -> str:
        if self.source is None:
            logger.debug("no policy source configured, keeping the host password")
            return password

        policy = snapshot_policy(self.source)
        logger.debug("replacing the host password to satisfy %r", policy)
        return generator.generate(
            policy.get_password_len(),
            policy,
            rng=self.rng,
            max_attempts=self.max_attempts,
        )

    def reset_password(self, password: str) -> str:
        logger.debug("password reset requested, policy not applied")
        return password

    def check_password(self, password: str) -> generator.ValidationResult:
        if self.source is None:
            return generator.Valid()

        return generator.validate(password, snapshot_policy(self.source))
