"""
Exceptions raised by the design engine.

Malformed style input never raises; these cover the few conditions where no
tree can be produced at all.
"""


class DesignEngineError(Exception):
    """Base class for design engine errors."""


class DesignTreeError(DesignEngineError):
    """No design tree could be produced (no document was supplied)."""


class DocumentLoadError(DesignEngineError):
    """A document could not be fetched from its URL."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Could not load {url}: {message}")
        self.url = url
