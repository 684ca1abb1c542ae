import logging
import sys
from datetime import datetime

# Longest context value written to the log before it is cut
MAX_CONTEXT_VALUE = 200

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


class ProgressLogger:
    """
    Writes batch progress to the log file, next to the tqdm bar on the console.

    One update() per decomposed word. A line is logged every 10% and at the
    end, carrying the running failure count and an ETA.
    """
    def __init__(self, total, desc="Decomposing words", logger=None):
        self.total = total
        self.done = 0
        self.failures = 0
        self.desc = desc
        self.logger = logger or logging.getLogger()
        self.start_time = datetime.now()
        self.last_log_percent = -1

    def update(self, failed=False):
        """Count one word, and whether it failed to decompose."""
        self.done += 1
        if failed:
            self.failures += 1
        percent = int((self.done / self.total) * 100) if self.total > 0 else 100

        if percent - self.last_log_percent >= 10 or self.done >= self.total:
            self.logger.info(self._status(percent))
            self.last_log_percent = percent

    def _status(self, percent):
        status = f"{self.desc}: {self.done}/{self.total} ({percent}%), {self.failures} failed"
        remaining = self.total - self.done
        if remaining > 0:
            elapsed = (datetime.now() - self.start_time).total_seconds()
            rate = self.done / elapsed if elapsed > 0 else 0
            if rate > 0:
                status += f" [ETA: {int(remaining / rate)}s]"
        return status

def setup_logging(log_file='dekomponilo.log', level=logging.INFO, debug=False, stream=None):
    """
    Configure the root logger for the command-line tools.

    Args:
        log_file: Path to the log file, or None for console only.
        level: Logging level (default: INFO). Ignored when debug is set.
        debug: Log at DEBUG with logger name, file and line in every record.
        stream: Console stream (default: stderr, so stdout stays clean for JSON output).
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    level = logging.DEBUG if debug else level
    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Run separator, so appended log files stay readable
    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
                 + (" (debug)" if debug else ""))
    logging.info("=" * 80)

def _truncate(value):
    text = str(value)
    if len(text) > MAX_CONTEXT_VALUE:
        return text[:MAX_CONTEXT_VALUE] + "..."
    return text

def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message with its context appended as key=value pairs on the same line.

    Args:
        message: Main log message
        context: Dict of contextual information (e.g. search counters)
        level: Log level (default: DEBUG)
        logger: Logger to use (default: root logger)
    """
    logger = logger or logging.getLogger()
    if not logger.isEnabledFor(level):
        return
    if context:
        pairs = " ".join(f"{key}={_truncate(value)}" for key, value in context.items())
        message = f"{message} [{pairs}]"
    logger.log(level, message)
