"""Sliding-window CPU usage statistics for the current process, with text and JSON reports."""

__version__ = "0.1.0"
__all__ = ["usage", "printers", "jsonout", "cli"]