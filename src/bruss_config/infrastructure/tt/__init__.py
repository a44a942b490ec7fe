from .client import TTClient

__all__ = ["TTClient"]
