from .settings import DEFAULT_API_BASE, Settings

__all__ = ["DEFAULT_API_BASE", "Settings"]
