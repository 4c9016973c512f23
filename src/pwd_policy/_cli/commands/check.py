import sys
from collections.abc import Iterator
from enum import StrEnum
from logging import getLogger

import click
from rich.console import Console
from rich.text import Text

from ... import _conf, generator
from ..exc import CLIError

__all__ = ["check"]


logger = getLogger(__name__)


class RecordStyle(StrEnum):
    VALID = "green"
    INVALID = "yellow"


def compose_record(label: str, result: generator.ValidationResult) -> Text:
    if isinstance(result, generator.Valid):
        return Text.assemble((label, "bold"), ": ", ("valid", RecordStyle.VALID))

    return Text.assemble(
        (label, "bold"),
        ": ",
        ("invalid (%s)" % result.reason, RecordStyle.INVALID),
        " ",
        result.message,
    )


@click.command()
@click.argument("password", required=False)
@click.pass_obj
def check(settings: _conf.Settings, password: str | None) -> None:
    """
    Check PASSWORD against the configured policy.

    If PASSWORD is omitted, every line read from standard input is checked instead.
    Exits with a non-zero status if at least one password is rejected.
    """

    def stream_passwords() -> Iterator[tuple[str, str]]:
        if password is not None:
            yield "password", password
            return

        for lineno, line in enumerate(sys.stdin, start=1):
            yield "line %d" % lineno, line.rstrip("\r\n")

    console = Console(highlight=False, soft_wrap=True)
    checked = rejected = 0

    for label, candidate in stream_passwords():
        result = generator.validate(candidate, settings.policy)
        checked += 1
        if not result:
            rejected += 1

        console.print(compose_record(label, result))

    logger.debug("checked %d password(s), %d rejected", checked, rejected)

    if rejected:
        raise CLIError(
            "%d of %d password(s) do not satisfy the policy" % (rejected, checked)
        )
