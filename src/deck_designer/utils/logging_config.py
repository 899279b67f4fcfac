"""
Logging setup for the deck designer.

The engine modules log through get_logger(); the HTTP service calls
DeckDesignerLogger.configure() once at startup to route those records to a
timestamped log file and the console. Placement loops emit one TRACE record
per joist or post, which only shows up when a logger is set to TRACE_LEVEL.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class DeckDesignerLogger:
    """
    Owns the root handlers and the TRACE level for the deck designer.

    The file handler records DEBUG and up in debug mode (INFO otherwise);
    the console stays at INFO so a layout request does not flood stdout.
    """

    # Below DEBUG: per-member placement records
    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Install Logger.trace once so engine modules can call logger.trace()."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """Log a per-member placement record at TRACE level."""
                if self.isEnabledFor(DeckDesignerLogger.TRACE_LEVEL):
                    self._log(DeckDesignerLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(debug_mode: bool = False, log_dir: str = "logs", console_mode: bool = True) -> str:
        """
        Route deck designer logging to a log file and the console.

        Replaces any handlers already on the root logger, so calling it again
        (e.g. on an app reload) starts a fresh log file instead of duplicating
        output.

        Args:
            debug_mode: If True, the root logger and log file record DEBUG
            log_dir: Directory for ``deck_designer_<timestamp>.log`` files
            console_mode: If True, console lines omit the logger name

        Returns:
            Path to the created log file
        """
        DeckDesignerLogger._add_trace_method()

        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"deck_designer_{timestamp}.log")

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

        if root_logger.handlers:
            root_logger.handlers.clear()

        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
        root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        if console_mode:
            console_formatter = logging.Formatter('%(levelname)s: %(message)s')
        else:
            console_formatter = logging.Formatter('%(name)s - %(levelname)s: %(message)s')

        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Logger for an engine module, with ``trace()`` available.

        Args:
            name: Logger name, typically __name__
            level: Optional level override, e.g. TRACE_LEVEL while debugging placement
        """
        DeckDesignerLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """Shorthand for DeckDesignerLogger.get_logger."""
    return DeckDesignerLogger.get_logger(name, level)
