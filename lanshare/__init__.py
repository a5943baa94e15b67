"""LAN Share - share text and files with devices on the local network."""

__version__ = "0.1.0"
