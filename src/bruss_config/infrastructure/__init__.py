"""Infrastructure: values handed to external collaborators (database driver, tt API)."""

from .mongo import ConnectionOptions, Credential, ServerAddress
from .tt import TTClient

__all__ = ["ConnectionOptions", "Credential", "ServerAddress", "TTClient"]
