"""Command group: inspect the word affinity graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphpoet.commands._base import PoetGroup
from graphpoet.services.graph import GraphService

if TYPE_CHECKING:
    from graphpoet.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  graphpoet --corpus mugar.txt graph stats
  graphpoet --corpus mugar.txt graph targets the
  graphpoet --corpus mugar.txt graph sources system
  graphpoet --corpus mugar.txt graph bridges test the --top 5"""


@click.group(cls=PoetGroup, examples=_GRAPH_EXAMPLES)
@click.pass_obj
def graph(app: AppContext) -> None:
    """Inspect the word affinity graph built from the corpus."""


@graph.command(
    examples="""\
  graphpoet --corpus mugar.txt graph stats
  graphpoet --json graph stats"""
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show vertex, edge, and weight counts."""
    app.emit(GraphService(app.engine).stats())


@graph.command(
    examples="""\
  graphpoet --corpus mugar.txt graph targets the
  graphpoet -q graph targets the"""
)
@click.argument("word")
@click.pass_obj
def targets(app: AppContext, word: str) -> None:
    """List words that follow WORD, heaviest first."""
    app.emit(GraphService(app.engine).targets(word))


@graph.command(
    examples="""\
  graphpoet --corpus mugar.txt graph sources system
  graphpoet -q graph sources system"""
)
@click.argument("word")
@click.pass_obj
def sources(app: AppContext, word: str) -> None:
    """List words that precede WORD, heaviest first."""
    app.emit(GraphService(app.engine).sources(word))


@graph.command(
    examples="""\
  graphpoet --corpus mugar.txt graph bridges test the
  graphpoet --json graph bridges explore new --top 3"""
)
@click.argument("left")
@click.argument("right")
@click.option("--top", default=10, type=click.IntRange(min=1), help="Max results.")
@click.pass_obj
def bridges(app: AppContext, left: str, right: str, top: int) -> None:
    """Rank bridge words between LEFT and RIGHT."""
    app.emit(GraphService(app.engine).bridges(left, right, top=top))
