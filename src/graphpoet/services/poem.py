"""PoemService — compose a poem by bridging adjacent input words."""

from __future__ import annotations

from typing import Any

import structlog

from graphpoet.domain.tokens import render_poem
from graphpoet.services.base import BaseService
from graphpoet.services.result import ServiceResult
from graphpoet.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class PoemService(BaseService):
    """Turns input text into a poem using the engine's poet."""

    @traced
    def compose(self, text: str) -> ServiceResult:
        """Insert at most one bridge word between each adjacent pair in *text*.

        Input is split on whitespace; every input token is kept verbatim.
        The result data carries the poem and one entry per inserted bridge.
        """
        words = text.split()
        if not words:
            return ServiceResult.failure("compose", "EMPTY_INPUT", "Input text contains no words")

        with trace_span("load_corpus") as span:
            poet = self._load_poet("compose")
            if isinstance(poet, ServiceResult):
                return poet
            if span:
                span.annotate("vertices", len(poet.graph))
                span.annotate("edges", poet.graph.number_of_edges())

        with trace_span("generate") as span:
            insertions = poet.insertions(words)
            output = poet.generate(words, insertions)
            if span:
                span.annotate("pairs", len(words) - 1)
                span.annotate("bridges", len(insertions))

        bridges: list[dict[str, Any]] = [
            {
                "position": ins.position,
                "left": ins.left,
                "right": ins.right,
                "bridge": ins.bridge.word,
                "score": ins.bridge.score,
            }
            for ins in insertions
        ]
        log.debug("poem.composed", words=len(words), bridges=len(bridges))

        return ServiceResult(
            ok=True,
            op="compose",
            data={
                "poem": render_poem(output),
                "input": text,
                "count": len(bridges),
                "bridges": bridges,
            },
            warnings=self._corpus_warnings(),
        )
