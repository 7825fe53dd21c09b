"""Static content source for termfolio.

Public API:
    ContentSource -- Validated, read-only content document
    load_content -- Load a YAML/JSON content file
    ContentError -- Raised when the document cannot be loaded
"""

from termfolio.content.source import ContentError, ContentSource, Identity, Project, load_content

__all__ = ["ContentError", "ContentSource", "Identity", "Project", "load_content"]
