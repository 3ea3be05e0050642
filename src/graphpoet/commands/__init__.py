"""Subcommand modules for graphpoet.

Provides register_commands() with deferred imports to keep
``graphpoet --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``graph`` group and the ``poem`` command on the root group."""
    from graphpoet.commands.graph import graph
    from graphpoet.commands.poem import poem

    cli.add_command(poem)
    cli.add_command(graph)
