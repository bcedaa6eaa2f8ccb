"""Exceptions raised while converting SVG files to sprites."""


class SpriteConversionError(Exception):
    """Base class for all conversion errors."""


class RasterizerNotFoundError(SpriteConversionError):
    """No supported rasterizer is installed on this host."""


class RasterizerProcessError(SpriteConversionError):
    """A rasterizer could not be started or exited with a non-zero status."""


class DecodeError(SpriteConversionError):
    """A rasterized intermediate could not be decoded as an RGBA bitmap."""


class DirectoryError(SpriteConversionError):
    """A directory tree could not be walked."""
