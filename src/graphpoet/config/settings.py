"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GRAPHPOET_*`` prefix
  3. TOML file    — ``graphpoet.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from graphpoet.config.discovery import find_config
from graphpoet.config.models import BridgeConfig, CorpusConfig, TokenizerConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``graphpoet.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PoetSettings(BaseSettings):
    """Unified settings for the graphpoet CLI.

    Attributes:
        project_root: Directory that relative corpus paths resolve against
            (parent of ``graphpoet.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        corpus_path: ``--corpus`` override; wins over ``[corpus] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GRAPHPOET_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    corpus_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        corpus_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> PoetSettings:
        """Construct settings from a CLI invocation.

        Discovers ``graphpoet.toml`` via walk-up (or explicit *config_path*)
        and merges CLI flags as highest-priority overrides. *corpus_path*
        is left as None when not given so env vars and TOML still apply.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        if corpus_path is not None:
            cli_flags["corpus_path"] = Path(corpus_path)

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def resolved_corpus_path(self) -> Path | None:
        """Corpus file in effect: ``--corpus`` first, then ``[corpus] path``.

        A relative ``[corpus] path`` resolves against *project_root*; a
        relative ``--corpus`` is taken as given (relative to CWD).
        """
        if self.corpus_path is not None:
            return self.corpus_path
        path = self.corpus.path
        if path is None:
            return None
        return path if path.is_absolute() else self.project_root / path
