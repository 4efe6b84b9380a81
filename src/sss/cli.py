# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Command line interface: split a secret into armoured shares and join them back."""

from __future__ import annotations

import logging

import click

from . import __version__, codec
from .errors import SSSError
from .policy import TEXT_FORMATS, policy
from .shamir import MAX_SHARES, join, join_to_string, split_secret, split_string
from .share import SecretShare


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else policy.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_shares(shares: tuple[str, ...], fmt: str) -> list[SecretShare]:
    if not shares:
        with click.open_file("-") as stdin:
            shares = tuple(line for line in (raw.strip() for raw in stdin) if line)
    if not shares:
        raise click.UsageError("no shares given")
    return [codec.from_text(text, fmt) for text in shares]


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Shamir's Secret Sharing over a prime field."""
    _configure_logging(verbose)


@cli.command("split")
@click.argument("secret")
@click.option("-n", "--total", type=click.IntRange(1, MAX_SHARES), required=True, help="Number of shares.")
@click.option("-k", "--threshold", type=click.IntRange(min=1), required=True, help="Shares needed to join.")
@click.option("--random-prime/--first-prime", default=None, help="Prime selection strategy.")
@click.option("--format", "fmt", type=click.Choice(TEXT_FORMATS), default=None, help="Share armour.")
@click.option("--integer", is_flag=True, help="Treat SECRET as a decimal integer.")
def split_command(
    secret: str,
    total: int,
    threshold: int,
    random_prime: bool | None,
    fmt: str | None,
    integer: bool,
) -> None:
    """Split SECRET into TOTAL shares, THRESHOLD of which recover it."""
    fmt = fmt or policy.text_format
    try:
        if integer:
            try:
                number = int(secret)
            except ValueError:
                raise click.BadParameter("not a decimal integer", param_hint="SECRET") from None
            shares = split_secret(number, total, threshold, random_prime=random_prime)
        else:
            shares = split_string(secret, total, threshold, random_prime=random_prime)
        for share in shares:
            click.echo(codec.to_text(share, fmt))
    except SSSError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("join")
@click.argument("shares", nargs=-1)
@click.option("--format", "fmt", type=click.Choice(TEXT_FORMATS), default=None, help="Share armour.")
@click.option("--integer", is_flag=True, help="Print the secret as a decimal integer.")
def join_command(shares: tuple[str, ...], fmt: str | None, integer: bool) -> None:
    """Join SHARES (or one share per stdin line) back into the secret."""
    fmt = fmt or policy.text_format
    try:
        decoded = _read_shares(shares, fmt)
        if integer:
            click.echo(join(decoded))
        else:
            click.echo(join_to_string(decoded))
    except SSSError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("inspect")
@click.argument("share")
@click.option("--format", "fmt", type=click.Choice(TEXT_FORMATS), default=None, help="Share armour.")
def inspect_command(share: str, fmt: str | None) -> None:
    """Show the public parameters of SHARE."""
    fmt = fmt or policy.text_format
    try:
        decoded = codec.from_text(share, fmt)
    except SSSError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"index: {decoded.index}")
    click.echo(f"prime: {decoded.prime}")
    click.echo(f"prime bits: {decoded.prime.bit_length()}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
