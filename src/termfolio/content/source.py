"""Static content document for the shell.

The content source supplies everything the commands render that is not
fixed text: the identity used in the prompt and greeting, the banner
art, social handles and project entries. It is loaded once before the
first render and never changes afterwards.

Both a flat layout and the nested layout of the original site config
(``identity`` next to a ``content`` block holding ``ascii``, ``social``
and ``projects``) are accepted. YAML is a superset of JSON, so
``config.json`` files load unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(default="guest")
    hostname: str = Field(default="termfolio")
    greeting: str = Field(default="")


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = Field(default="")
    link: str


class ContentSource(BaseModel):
    """Read-only content consumed by the command handlers.

    ``social`` preserves insertion order, which is also display order.
    """

    model_config = ConfigDict(frozen=True)

    identity: Identity = Field(default_factory=Identity)
    ascii: tuple[str, ...] = Field(default=(), description="Banner lines, top to bottom")
    social: dict[str, str] = Field(default_factory=dict)
    projects: tuple[Project, ...] = Field(default=())


def load_content(path: Path | str) -> ContentSource:
    """Load and validate a content document from YAML or JSON.

    Raises:
        ContentError: If the file is missing, unparsable, or fails
                      validation.
    """
    path = Path(path)
    if not path.exists():
        raise ContentError(f"Content file {path} not found", path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ContentError(f"Content file {path} is not valid YAML/JSON: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ContentError(f"Content file {path} must contain a mapping", path=str(path))

    # Original site config nests everything but identity under "content"
    nested = data.pop("content", None)
    if isinstance(nested, dict):
        data = {**nested, **data}

    try:
        content = ContentSource.model_validate(data)
    except ValidationError as e:
        raise ContentError(f"Invalid content in {path}: {e}", path=str(path)) from e

    logger.info(
        "Loaded content from %s (%d banner lines, %d social, %d projects)",
        path, len(content.ascii), len(content.social), len(content.projects),
    )
    return content


class ContentError(Exception):
    """Raised when the content document cannot be loaded."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
