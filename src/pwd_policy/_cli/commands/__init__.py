from .check import check
from .generate import generate

__all__ = ("check", "generate")
