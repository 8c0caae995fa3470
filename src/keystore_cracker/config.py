"""
Configuration for the keystore cracker.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Logging configuration
PACKAGE_LOGGER = "keystore_cracker"
LOG_DIR = Path("logs")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Worker pool configuration
MIN_WORKERS = 1
MAX_WORKERS = 100
DEFAULT_WORKERS = min(8, os.cpu_count() or 1)
PROGRESS_INTERVAL = 1.0  # seconds between progress reports

# Password grammar: [5-12 chars] + [1-5 digits] + [1 special char]
MIN_BASE_LENGTH = 5
MAX_BASE_LENGTH = 12
MIN_DIGITS = 1
MAX_DIGITS = 5
SPECIAL_LENGTH = 1
MAX_WORD_LENGTH = 20
WORD_SEPARATORS: tuple[str, ...] = ("", "-", "_", ".")

# Keystore / validator limits
MAX_PASSWORD_LENGTH = 1000
MAX_PATH_LENGTH = 4096
MAX_KEYSTORE_SIZE_BYTES = 10 * 1024 * 1024

# Files
DEFAULT_CONFIG_FILE = Path("password_config.md")
OUTPUT_FILE = Path("recovered_password.txt")


def setup_logger(name: str = PACKAGE_LOGGER, log_level: int = logging.INFO, log_dir: Path | None = LOG_DIR) -> logging.Logger:
    """
    Set up a logger with consistent formatting and handlers.

    Calling it again for the same name only updates the level.

    Args:
        name: The name of the logger
        log_level: The logging level (default: INFO)
        log_dir: Directory for the log file, None for console only

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(
            log_dir / f"{name}.log",
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="keystore-cracker",
        description="Recover an Ethereum keystore password. "
                    f"Pattern: [{MIN_BASE_LENGTH}-{MAX_BASE_LENGTH} chars] + "
                    f"[{MIN_DIGITS}-{MAX_DIGITS} digits] + [1 special char]")
    parser.add_argument("keystore", type=Path, nargs="?",
                        help='Path to the keystore JSON file')
    parser.add_argument("config", type=Path, nargs="?", default=DEFAULT_CONFIG_FILE,
                        help=f'Path to the markdown password config (default: {DEFAULT_CONFIG_FILE})')
    parser.add_argument("--workers", "-w", type=int, default=DEFAULT_WORKERS,
                        help=f'Number of worker threads, {MIN_WORKERS}-{MAX_WORKERS} '
                             f'(default: {DEFAULT_WORKERS})')
    parser.add_argument("--timeout", type=float, default=None,
                        help='Stop searching after this many seconds')
    parser.add_argument("--progress-interval", type=float, default=PROGRESS_INTERVAL,
                        help='Seconds between progress reports')
    parser.add_argument("--init-config", type=Path, nargs="?", const=DEFAULT_CONFIG_FILE,
                        default=None, metavar="PATH",
                        help=f'Write a sample config file to PATH and exit '
                             f'(default: {DEFAULT_CONFIG_FILE})')
    parser.add_argument("--show-password", action="store_true",
                        help='Print the recovered password')
    parser.add_argument("--save", action="store_true",
                        help='Save the recovered password to a file')
    parser.add_argument("--output", "-o", type=Path, default=OUTPUT_FILE,
                        help=f'File used by --save (default: {OUTPUT_FILE})')
    parser.add_argument('--log-level', type=str, default='info',
                        choices=['debug', 'info',
                                 'warning', 'error', 'critical'],
                        help='Log level to use')

    args = parser.parse_args(argv)
    args.log_level = getattr(logging, args.log_level.upper())

    if args.keystore is None and args.init_config is None:
        parser.error("the keystore path is required unless --init-config is given")

    return args
