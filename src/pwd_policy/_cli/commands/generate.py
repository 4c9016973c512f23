import random
from logging import getLogger

import click

from ... import _conf, exc, generator
from ..exc import GenerationError

__all__ = ["generate", "DEFAULT_LENGTH"]


logger = getLogger(__name__)

# used when neither --length nor the policy sets a length
DEFAULT_LENGTH = 12


@click.command()
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate, one per line.",
)
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=0),
    help=(
        "Length of each password. Defaults to the minimum length of the configured "
        "policy, or %d when the policy does not set one." % DEFAULT_LENGTH
    ),
)
@click.option(
    "--unconstrained",
    is_flag=True,
    default=False,
    help=(
        "Ignore the policy and draw from every character class. Meant for "
        "temporary passwords such as reset keys."
    ),
)
@click.option(
    "--seed",
    type=int,
    help="Seed the random number generator to get reproducible output.",
)
@click.pass_obj
def generate(
    settings: _conf.Settings,
    count: int,
    length: int | None,
    unconstrained: bool,
    seed: int | None,
) -> None:
    """Generate passwords that satisfy the configured policy."""
    policy = settings.policy
    rng = random.Random(seed)

    if length is None:
        length = policy.get_password_len() or DEFAULT_LENGTH

    logger.debug(
        "generating %d password(s) of length %d (unconstrained=%s)",
        count,
        length,
        unconstrained,
    )

    for _ in range(count):
        if unconstrained:
            click.echo(generator.generate_unconstrained(length, rng=rng))
            continue

        try:
            password = generator.generate(
                length, policy, rng=rng, max_attempts=settings.max_attempts
            )
        except exc.UnsatisfiablePolicyError as ex:
            raise GenerationError(str(ex)) from ex

        click.echo(password)
