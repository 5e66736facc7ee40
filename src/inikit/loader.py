"""IniLoader: reads a document from disk, optionally creating a default one."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from inikit.config import Config
from inikit.defaults import render_default_document
from inikit.document import Document, parse, parse_string
from inikit.errors import ConfigError, SourceUnavailableError

__all__ = ["LoaderSettings", "IniLoader", "load"]

logger = logging.getLogger(__name__)


class LoaderSettings(BaseModel):
    """Validated ``loader.*`` settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = "utf-8"
    create_default: bool = False

    @classmethod
    def from_config(cls, config: Config) -> LoaderSettings:
        raw = config.get("loader", {})
        if not isinstance(raw, dict):
            raise ConfigError(message="'loader' settings must be a mapping")
        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid loader settings: {e}", cause=e) from e


class IniLoader:
    """File collaborator around :func:`inikit.document.parse`.

    When the file is missing and ``create_default`` is enabled, the
    built-in default document is returned and written to the path.
    """

    def __init__(self, config: Config | None = None, *, create_default: bool | None = None) -> None:
        self._config = config or Config()
        settings = LoaderSettings.from_config(self._config)
        if create_default is not None:
            settings = settings.model_copy(update={"create_default": create_default})
        self._settings = settings

    @property
    def settings(self) -> LoaderSettings:
        return self._settings

    def load(self, path: str | Path) -> Document:
        """Parse the file at ``path``."""
        file_path = Path(path)

        if not file_path.is_file():
            if not self._settings.create_default:
                raise SourceUnavailableError(path=str(file_path), reason="file not found")
            document = parse_string(render_default_document())
            self.write_default(file_path)
            return document

        try:
            with file_path.open(encoding=self._settings.encoding, newline="\n") as stream:
                return parse(stream)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(path=str(file_path), reason=str(e), cause=e) from e

    def write_default(self, path: str | Path) -> None:
        """Write the default document text to ``path`` verbatim."""
        file_path = Path(path)
        try:
            file_path.write_text(render_default_document(), encoding=self._settings.encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise SourceUnavailableError(
                path=str(file_path), reason=f"cannot create default file: {e}", cause=e
            ) from e
        logger.info(f"Created default configuration file: {file_path}")


def load(path: str | Path, create_default: bool = False) -> Document:
    """Load a document with default settings."""
    return IniLoader(create_default=create_default).load(path)
