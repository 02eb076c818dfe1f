"""No-op stand-ins for managers that need a real terminal."""

from .display_manager import DisplayManager

__all__ = ["DisplayManager"]
