import logging
import sys
from typing import TextIO


def setup_logging(*, level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure logging for the command line tool.

    Sets third-party loggers (e.g., 'requests', 'urllib3') to WARNING and configures the
    root logger to output logs to ``stream`` (stdout by default) with a custom format.

    Parameters:
        level (int): Root logger level.
        stream (TextIO, optional): Destination stream for log records.
    """
    for logger_name in ("requests", "urllib3"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=level,
        force=True,
    )
