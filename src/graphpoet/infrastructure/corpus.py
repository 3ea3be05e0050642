"""Corpus file loading."""

from __future__ import annotations

from pathlib import Path

import structlog

from graphpoet.domain.tokens import tokenize

log = structlog.get_logger(__name__)


class CorpusError(Exception):
    """Base class for corpus loading failures."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class CorpusNotFoundError(CorpusError):
    """The corpus path does not name a file."""


class CorpusUnreadableError(CorpusError):
    """The corpus file exists but its text cannot be read."""


class CorpusDecodeError(CorpusUnreadableError):
    """The corpus file could not be decoded with the configured encoding."""


def read_corpus(path: Path, *, encoding: str = "utf-8") -> str:
    """Read the whole corpus file as text."""
    if not path.is_file():
        raise CorpusNotFoundError(path, f"Corpus file not found: {path}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise CorpusDecodeError(path, f"Cannot decode {path} as {encoding}: {exc.reason}") from exc
    except LookupError as exc:
        raise CorpusDecodeError(path, f"Unknown corpus encoding {encoding!r}") from exc
    except OSError as exc:
        raise CorpusUnreadableError(path, f"Cannot read corpus {path}: {exc.strerror}") from exc


def load_corpus_words(
    path: Path,
    *,
    encoding: str = "utf-8",
    strip_punctuation: bool = True,
) -> list[str]:
    """Read *path* and return its normalized word keys in order."""
    text = read_corpus(path, encoding=encoding)
    words = [t.key for t in tokenize(text, strip_punctuation=strip_punctuation)]
    log.debug("corpus.loaded", path=str(path), words=len(words))
    return words
