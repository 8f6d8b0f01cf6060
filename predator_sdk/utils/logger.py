import os
import logging
import queue
import signal
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from typing import Optional


class BaseThreadFormatter(logging.Formatter):
    """
    Base formatter that records the emitting thread. Requests run in worker
    threads via ``asyncio.to_thread``, so the thread name is worth keeping.
    """

    _base_format = "%(asctime)s - %(name)s - %(levelname)s - %(actthread)s - %(funcName)s() - %(message)s"

    def __init__(self, fmt=None):
        super().__init__(fmt or self._base_format)

    def format(self, record):
        if not hasattr(record, "actthread"):
            # QueueListener formats on its own thread; keep the emitting one
            record.actthread = f"{record.threadName} ({record.thread})"
        return super().format(record)


class StandardFormatter(BaseThreadFormatter):
    """Plain formatter with thread tracking for all log levels."""


class ColoredFormatter(BaseThreadFormatter):
    """A colored formatter that applies different colors based on log level"""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    def __init__(self):
        super().__init__(None)
        self.FORMATS = {
            logging.DEBUG: f"{self.grey}{self._base_format}{self.reset}",
            logging.INFO: f"{self.grey}{self._base_format}{self.reset}",
            logging.WARNING: f"{self.yellow}{self._base_format}{self.reset}",
            logging.ERROR: f"{self.red}{self._base_format}{self.reset}",
            logging.CRITICAL: f"{self.bold_red}{self._base_format}{self.reset}",
        }
        self._formatters = {
            level: logging.Formatter(fmt) for level, fmt in self.FORMATS.items()
        }

    def format(self, record):
        super().format(record)
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


class ThreadLogger:
    """A logger whose handlers run on a background listener thread"""

    VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(self, *, name: str, signal_level: str = "INFO", handle_signals: bool = False):
        self.name = name
        self.log_queue = queue.Queue(-1)
        self.handlers: list[logging.Handler] = []
        self.listener: Optional[QueueListener] = None

        if signal_level.upper() not in self.VALID_LEVELS:
            raise ValueError(f"Invalid log level '{signal_level}'")
        self.signal_level = getattr(logging, signal_level.upper())

        self._setup()
        if handle_signals:
            self._setup_signal_handlers()

    def _setup(self):
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG)

        # A second ThreadLogger with the same name takes over the logger
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        self.queue_handler = QueueHandler(self.log_queue)
        self.logger.addHandler(self.queue_handler)

    def add_handler(self, handler: logging.Handler):
        """Add a handler to the logger"""
        self.handlers.append(handler)
        self._restart_listener()
        self.logger.debug(f"Handler added: {type(handler).__name__}")

    def remove_handler(self, handler: logging.Handler):
        """Remove a handler from the logger"""
        if handler in self.handlers:
            self.handlers.remove(handler)
            self._restart_listener()
            self.logger.debug(f"Handler removed: {type(handler).__name__}")

    def _restart_listener(self):
        if self.listener:
            self.listener.stop()

        if self.handlers:
            self.listener = QueueListener(
                self.log_queue, *self.handlers, respect_handler_level=True
            )
            self.listener.start()
        else:
            self.listener = None

    def _setup_signal_handlers(self):
        """SIGUSR1 raises verbosity, SIGUSR2 lowers it"""
        if not (hasattr(signal, "SIGUSR1") and hasattr(signal, "SIGUSR2")):
            self.logger.warning("Platform does not support SIGUSR1/SIGUSR2 signals")
            return
        signal.signal(signal.SIGUSR1, self._handle_sigusr1)
        signal.signal(signal.SIGUSR2, self._handle_sigusr2)
        self.logger.info(f"Verbosity signals registered: kill -SIGUSR1|-SIGUSR2 {os.getpid()}")

    def _handle_sigusr1(self, signum, frame):
        if self.signal_level > logging.DEBUG:
            self.set_all_handler_levels(self.signal_level - 10)

    def _handle_sigusr2(self, signum, frame):
        if self.signal_level < logging.CRITICAL:
            self.set_all_handler_levels(self.signal_level + 10)

    def set_all_handler_levels(self, level):
        """Set log level for all handlers"""
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        self.signal_level = level
        for handler in self.handlers:
            handler.setLevel(level)
        self.logger.info(f"All handlers set to level {logging.getLevelName(level)}")

    def get_logger(self) -> logging.Logger:
        return self.logger

    def shutdown(self) -> bool:
        """Stop the listener thread, flushing queued records"""
        self.logger.removeHandler(self.queue_handler)
        if self.listener:
            self.listener.stop()
            self.listener = None
            return True
        return False


def create_console_handler(*, level=logging.INFO, colored: bool = True):
    """Create a console handler with optional coloring"""
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter() if colored else StandardFormatter())
    return handler


def create_file_handler(
    *,
    log_file: str,
    level=logging.DEBUG,
    rotate: bool = True,
    when: str = "midnight",
    interval: int = 1,
    backup_count: int = 10,
):
    """Create a file handler with optional rotation"""
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    if rotate:
        handler = TimedRotatingFileHandler(
            log_file, when=when, interval=interval, backupCount=backup_count
        )
        handler.suffix = "%Y-%m-%d_%H-%M-%S.log"
    else:
        handler = logging.FileHandler(log_file)

    handler.setLevel(level)
    handler.setFormatter(StandardFormatter())
    return handler
