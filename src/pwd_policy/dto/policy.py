from enum import StrEnum
from typing import Annotated

import annotated_types
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = ("PolicyRule", "PolicyConfiguration")


class PolicyRule(StrEnum):
    MIXED_CASE = "mixed-case"
    NUMBERS = "numbers"
    SPECIAL = "special"


class PolicyConfiguration(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    # 0 disables the minimum length check
    password_length: Annotated[int, annotated_types.Ge(0)] = 0
    rules: frozenset[PolicyRule] = Field(default_factory=frozenset)

    def is_policy_enabled(self, rule: PolicyRule) -> bool:
        return rule in self.rules

    def get_password_len(self) -> int:
        return self.password_length
