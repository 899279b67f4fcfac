# File: src/deck_designer/utils/__init__.py

from .logging_config import DeckDesignerLogger, get_logger

__all__ = ["DeckDesignerLogger", "get_logger"]
