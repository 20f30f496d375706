import logging
import sys
from typing import Union

HANDLER_NAME = "railhop-console"


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configure the root logger to write to stderr.

    stdout carries the answer line only. Calling this again replaces the
    handler installed by the previous call instead of adding another.

    Args:
        level: Logging level (number or name).
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
