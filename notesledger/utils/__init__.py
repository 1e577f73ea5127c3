from notesledger.utils.logging_utils import configure_logging

__all__ = ["configure_logging"]
