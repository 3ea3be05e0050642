"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphpoet.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from graphpoet.domain.bridges import BridgeMetric

# --- graphpoet.toml sections ---


class CorpusConfig(BaseModel):
    """[corpus] section."""

    model_config = {"frozen": True}

    path: Path | None = None
    encoding: str = "utf-8"


class TokenizerConfig(BaseModel):
    """[tokenizer] section."""

    model_config = {"frozen": True}

    strip_punctuation: bool = True


class BridgeConfig(BaseModel):
    """[bridge] section.

    ``metric`` combines the two edge weights of a path ``w1 -> b -> w2``.
    Ties are always broken by the bridge word, ascending.
    """

    model_config = {"frozen": True}

    metric: BridgeMetric = BridgeMetric.SUM
