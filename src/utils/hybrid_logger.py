"""
Hybrid logging for the PWM LED panel (colored console + timestamped log file)
"""

import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path
from contextlib import suppress
from typing import Optional, Dict


class ColoredFormatter(logging.Formatter):
    """Formatter producing '[time] [level] [class] message' lines, optionally colored"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__('[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"

        return formatted


class ClassLogger:
    """Per-class logger wrapper with its own level threshold"""

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if level < self.level:
            return
        exc_info_tuple = sys.exc_info() if exc_info else None
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (), exc_info_tuple
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    @staticmethod
    def _describe(message: str, exception: Exception) -> str:
        exc_type = type(exception).__name__
        tb = traceback.extract_tb(exception.__traceback__)
        filename, lineno = (tb[-1].filename, tb[-1].lineno) if tb else ("unknown", 0)
        return f"{message} | Type: {exc_type} | File: {filename} | Line: {lineno}"

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log error message, appending type/file/line details when an exception is given"""
        if exception is not None:
            self._log(logging.ERROR, self._describe(message, exception), exc_info=True)
            self.flush()
        else:
            self._log(logging.ERROR, message)

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)
        self.flush()

    def flush(self) -> None:
        """Flush all handlers of the underlying logger"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """Logger factory: one named logger with console and file handlers, per-class wrappers"""

    def __init__(self, name: str = "app", log_dir: str = "logs", log_to_file: bool = True):
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file
        self.log_file: Optional[Path] = None
        self.main_logger: Optional[logging.Logger] = None
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger()

    def _setup_main_logger(self) -> None:
        self.main_logger = logging.getLogger(self.name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False

        # Re-creating a HybridLogger with the same name must not duplicate output
        self.main_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(use_colors=True))
        self.main_logger.addHandler(console_handler)

        if self.log_to_file:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
            self.log_file = Path(self.log_dir) / f"{self.name}_{timestamp}.log"

            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter(use_colors=False))
            self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get (or create) the logger for a specific class.

        Args:
            class_name: Name shown in the [class] column of each line
            level: Minimum level this class logs at

        Returns:
            ClassLogger: cached per class name
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close every handler"""
        if self.main_logger:
            for handler in self.main_logger.handlers:
                with suppress(OSError, ValueError):
                    handler.flush()
                    handler.close()
            self.main_logger.handlers.clear()
