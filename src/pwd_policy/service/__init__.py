from ._password import PasswordService, PolicySource, snapshot_policy

__all__ = (
    "PasswordService",
    "PolicySource",
    "snapshot_policy",
)
