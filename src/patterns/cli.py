"""CLI entry point for the pattern demos. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from patterns.config import DemoConfig


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Diagnostic log level",
)
@click.pass_context
def main(ctx, log_level):
    """Run design pattern demonstrations."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _load_config(seed, delay, length) -> DemoConfig:
    try:
        config = DemoConfig.from_env()
        if seed is not None:
            config.seed = seed
        if delay is not None:
            config.char_delay = delay
        if length is not None:
            config.state_length = length
        config.__post_init__()
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return config


@main.command()
@click.option("--seed", type=int, default=None, help="Seed for generated states")
@click.option("--delay", type=float, default=None, help="Seconds to sleep per generated character")
@click.option("--length", type=int, default=None, help="Length of generated states")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors")
def memento(seed, delay, length, no_color):
    """Back up, mutate and undo an originator's state."""
    from patterns.demos import run_memento

    run_memento(config=_load_config(seed, delay, length), color=not no_color)


@main.command()
def chain():
    """Pass food requests along a chain of handlers."""
    from patterns.demos import run_chain

    run_chain()


@main.command()
def iterator():
    """Walk a words collection forwards and backwards."""
    from patterns.demos import run_iterator

    run_iterator()


@main.command()
def singleton():
    """Check that the singleton hands out one instance."""
    from patterns.demos import run_singleton

    if not run_singleton():
        sys.exit(1)


@main.command("all")
@click.option("--seed", type=int, default=None, help="Seed for generated states")
def run_all(seed):
    """Run every demo in turn."""
    from patterns.demos import run_chain, run_iterator, run_memento, run_singleton

    sections = [
        ("Chain of Responsibility", run_chain),
        ("Iterator", run_iterator),
        ("Memento", lambda: run_memento(config=_load_config(seed, None, None))),
        ("Singleton", run_singleton),
    ]
    for title, run in sections:
        click.echo(f"=== {title} ===")
        run()
        click.echo("")


if __name__ == "__main__":
    main()
