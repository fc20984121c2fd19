"""Images and coloured squares in the terminal via the kitty graphics protocol."""

__version__ = "0.1.0"