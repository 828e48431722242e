# Module for setting up logging for a mirror run
import logging
import sys
import os

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
# Loggers of the HTTP stack; their per-connection chatter is only useful when debugging.
QUIET_LOGGERS = ("urllib3",)


def setup_logging(log_file, log_level="INFO"):
    """
    Sets up logging to console and file at the configured level.

    The root logger gets a file handler (appending to log_file) and a stdout
    handler; handlers from an earlier call are replaced. Unless the level is
    DEBUG, the HTTP stack's loggers are held at WARNING.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # File handler
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        # A run without its log is not worth starting
        print(f"Error: Could not set up file logging to {log_file}: {e}", file=sys.stderr)
        sys.exit(1)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)

    logging.info(f"Logging to {log_file} at level {logging.getLevelName(level)}.")
