"""BaseService — shared foundation for graphpoet services.

Every service receives a :class:`PoetEngine` at construction time and
reaches the poet through :meth:`BaseService._load_poet`, which converts
corpus failures into error results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphpoet.infrastructure.corpus import CorpusError, CorpusUnreadableError
from graphpoet.infrastructure.engine import NoCorpusConfiguredError
from graphpoet.services.result import ServiceResult

if TYPE_CHECKING:
    from graphpoet.domain.poet import AffinityPoet
    from graphpoet.infrastructure.engine import PoetEngine

logger = logging.getLogger(__name__)

SHORT_CORPUS_WARNING = "Corpus has fewer than two words; no bridges are possible"


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PoemService(BaseService):
            def compose(self, text: str) -> ServiceResult:
                poet = self._load_poet("compose")
                if isinstance(poet, ServiceResult):
                    return poet
                ...
    """

    def __init__(self, engine: PoetEngine) -> None:
        self._engine = engine

    def _load_poet(self, op: str) -> AffinityPoet | ServiceResult:
        """Return the engine's poet, or a failed result explaining why not."""
        try:
            return self._engine.poet
        except NoCorpusConfiguredError as exc:
            return ServiceResult.failure(op, "NO_CORPUS", str(exc))
        except CorpusUnreadableError as exc:
            logger.debug("Corpus unreadable: %s", exc.path, exc_info=True)
            return ServiceResult.failure(op, "CORPUS_UNREADABLE", str(exc), path=str(exc.path))
        except CorpusError as exc:
            return ServiceResult.failure(op, "CORPUS_NOT_FOUND", str(exc), path=str(exc.path))

    def _corpus_warnings(self) -> list[str]:
        """Non-fatal issues with the loaded corpus."""
        if self._engine.corpus_words < 2:
            return [SHORT_CORPUS_WARNING]
        return []
