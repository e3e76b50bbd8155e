import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path("data/logs")
LOG_FILE = LOG_DIR / "slugable.log"

_file_handler = None


class NoiseFilter(logging.Filter):
    """Filter out noisy third-party library debug logs."""

    NOISY_LOGGERS = [
        'multipart.multipart',
        'asyncio',
        'watchfiles',
        'sqlalchemy.engine',
    ]

    def filter(self, record):
        for noisy in self.NOISY_LOGGERS:
            if record.name.startswith(noisy) and record.levelno == logging.DEBUG:
                return False
        return True


def setup_logging(max_bytes=10485760, backup_count=5, log_level=logging.WARNING, log_file=None):
    """
    Configure rotating file handler and console handler.

    Args:
        max_bytes: Maximum size of log file before rotation (default 10MB)
        backup_count: Number of backup files to keep (default 5)
        log_level: Minimum log level to capture (default WARNING)
        log_file: Override for the log file location
    """
    global _file_handler

    log_file = Path(log_file) if log_file else LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    if _file_handler is not None:
        root_logger.removeHandler(_file_handler)
        _file_handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.addFilter(NoiseFilter())
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Console handler for Docker logs
    if not any(getattr(h, '_slugable_console', False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler._slugable_console = True
        console_handler.addFilter(NoiseFilter())
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    for handler in root_logger.handlers:
        if getattr(handler, '_slugable_console', False):
            handler.setLevel(log_level)

    if root_logger.level > log_level or root_logger.level == logging.NOTSET:
        root_logger.setLevel(log_level)

    _file_handler = file_handler
    return file_handler
