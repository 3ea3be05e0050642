"""Command: compose a poem from input text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphpoet.commands._base import PoetCommand
from graphpoet.services.poem import PoemService

if TYPE_CHECKING:
    from graphpoet.commands._context import AppContext


@click.command(
    cls=PoetCommand,
    examples="""\
  graphpoet --corpus mugar.txt poem "Test the system."
  graphpoet --corpus mugar.txt poem Test the system.
  echo "Test the system." | graphpoet --corpus mugar.txt poem
  graphpoet --json --corpus mugar.txt poem "Test the system."
  graphpoet -v --corpus mugar.txt poem Test the system.""",
)
@click.argument("text", nargs=-1)
@click.pass_obj
def poem(app: AppContext, text: tuple[str, ...]) -> None:
    """Insert bridge words between adjacent words of TEXT.

    TEXT is read from stdin when omitted or given as '-'.
    """
    if not text or text == ("-",):
        source = click.get_text_stream("stdin").read()
    else:
        source = " ".join(text)
    app.emit(PoemService(app.engine).compose(source))
