"""Terminal drawing toolkit: colours, dithering, cell buffers, an in-memory screen, capabilities and clipboard."""

__version__ = "0.1.0"