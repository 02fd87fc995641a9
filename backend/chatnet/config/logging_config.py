import logging
from logging.handlers import RotatingFileHandler
import io
import sys
from pathlib import Path
from contextvars import ContextVar
from chatnet.config.settings import Config

NO_TRANSACTION = "NO Transaction ID"

# Context variable holding the id of the transaction being processed
transaction_id_var: ContextVar[str] = ContextVar(
    "transaction_id", default=NO_TRANSACTION
)


class TransactionIdFilter(logging.Filter):
    """Logging filter to add the transaction ID to log records."""

    def filter(self, record):
        record.transaction_id = transaction_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures transaction_id always exists."""

    def format(self, record):
        if not hasattr(record, "transaction_id"):
            record.transaction_id = NO_TRANSACTION
        return super().format(record)


def setup_logging(level: str = Config.LOG_LEVEL, log_file: str | None = Config.LOG_FILE):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    root.addFilter(TransactionIdFilter())
    logger_handler = logging.StreamHandler(
        io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    )
    formatter = SafeFormatter(Config.LOG_FORMAT)
    logger_handler.setFormatter(formatter)
    logger_handler.addFilter(TransactionIdFilter())
    root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(TransactionIdFilter())
        root.addHandler(file_handler)

    logging.getLogger("chatnet").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger(__name__).info(f"Logging is set up: level={level}, log_file={log_file}")

    return root
