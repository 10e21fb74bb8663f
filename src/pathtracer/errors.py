# errors.py


class PathTracerError(Exception):
    """Base class for errors raised by the renderer."""


class ConfigurationError(PathTracerError, ValueError):
    """Raised before rendering starts when camera or renderer settings are invalid."""


class RenderError(PathTracerError, RuntimeError):
    """
    Raised when a tile fails to render. The render as a whole is abandoned;
    the failing tile is available as `tile` and the original exception is
    chained as __cause__.
    """
    def __init__(self, message: str, tile=None):
        super().__init__(message)
        self.tile = tile
