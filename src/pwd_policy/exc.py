import pathlib
from dataclasses import dataclass
from typing import NotRequired, TypedDict

from typing_extensions import override

from .dto.policy import PolicyConfiguration

__all__ = (
    "ApplicationError",
    "Location",
    "UnsatisfiablePolicyError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


@dataclass(slots=True)
class UnsatisfiablePolicyError(ApplicationError):
    """
    Raised when the generator gives up after the configured number of attempts.

    This usually means the requested length is too short to fit one character of
    every enabled class (e.g. a single character cannot be upper case, a digit and
    a special character at the same time).
    """

    class Context(TypedDict):
        """
        Attributes:
            policy: The policy no candidate managed to satisfy.
            length: The requested password length.
            attempts: How many candidates were drawn and rejected.
        """

        policy: PolicyConfiguration
        length: int
        attempts: int

    ctx: Context

    @override
    def format_message(self) -> str:
        return (
            "Gave up after %d attempt(s) generating a %d-character password.\n\n%s"
            % (
                self.ctx["attempts"],
                self.ctx["length"],
                self.message.format(ctx=self.ctx),
            )
        )
