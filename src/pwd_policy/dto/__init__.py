from .policy import PolicyConfiguration, PolicyRule

__all__ = (
    "PolicyConfiguration",
    "PolicyRule",
)
