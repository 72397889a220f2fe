from .config import settings, setup_logging

__all__ = ["settings", "setup_logging"]
