# core/errors.py


class RenderError(Exception):
    """Base class for failures that abort a render."""


class ImageWriteError(RenderError):
    """The output image could not be written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"output file could not be opened: {path} ({reason})")


class ConfigError(ValueError):
    """Invalid render configuration."""
