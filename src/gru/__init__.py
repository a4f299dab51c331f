"""gru - hardware management CLI result rendering and BIOS attribute decoding."""

from gru.__version__ import __version__

__all__ = ["__version__"]
