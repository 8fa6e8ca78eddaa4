"""Game Boy memory bus, I/O registers, timer, video memory, layer rendering and debug views."""

__version__ = "0.1.0"