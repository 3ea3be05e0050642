"""PoetEngine — lazy-built AffinityPoet from the configured corpus.

Built on first access to :attr:`PoetEngine.poet`, then cached for the life
of the engine. Commands that fail before needing the poet never read the
corpus.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from graphpoet.domain.poet import AffinityPoet
from graphpoet.domain.tokens import normalize_word
from graphpoet.infrastructure.corpus import load_corpus_words

if TYPE_CHECKING:
    from graphpoet.config.settings import PoetSettings

log = structlog.get_logger(__name__)


class NoCorpusConfiguredError(Exception):
    """Neither ``--corpus`` nor ``[corpus] path`` names a corpus file."""


class PoetEngine:
    """Owns the corpus settings and the poet built from them."""

    def __init__(self, settings: PoetSettings) -> None:
        self._settings = settings
        self._poet: AffinityPoet | None = None
        self.corpus_words = 0

    @property
    def settings(self) -> PoetSettings:
        return self._settings

    @property
    def corpus_path(self) -> Path | None:
        return self._settings.resolved_corpus_path()

    @property
    def poet(self) -> AffinityPoet:
        """Return the poet, building it from the corpus on first access.

        Raises:
            NoCorpusConfiguredError: no corpus path is configured.
            CorpusError: the corpus file is missing or unreadable.
        """
        if self._poet is None:
            self._poet = self._build()
        return self._poet

    def normalize(self, word: str) -> str:
        return normalize_word(word, strip_punctuation=self._settings.tokenizer.strip_punctuation)

    def invalidate(self) -> None:
        """Drop the cached poet, forcing a rebuild on next access."""
        self._poet = None
        self.corpus_words = 0

    def _build(self) -> AffinityPoet:
        path = self.corpus_path
        if path is None:
            msg = "No corpus configured; pass --corpus or set [corpus] path"
            raise NoCorpusConfiguredError(msg)

        strip = self._settings.tokenizer.strip_punctuation
        words = load_corpus_words(
            path,
            encoding=self._settings.corpus.encoding,
            strip_punctuation=strip,
        )
        poet = AffinityPoet.build(
            words,
            metric=self._settings.bridge.metric,
            normalize=functools.partial(normalize_word, strip_punctuation=strip),
        )
        self.corpus_words = len(words)
        log.debug(
            "poet.built",
            corpus=str(path),
            words=len(words),
            vertices=len(poet.graph),
            edges=poet.graph.number_of_edges(),
            metric=str(poet.metric),
        )
        return poet
