# region Imports
import logging
import os
import sys
from typing import Optional

from wizard_pathfinder.config import LOG_FORMAT
# endregion

# region Setup
def setup_logging(
    level: int = logging.INFO,
    *,
    log_file: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure the root logger for a simulation run:
    - console handler on ``stream`` (stderr by default, stdout stays clean)
    - optional file handler at ``log_file``

    Calling it again only adjusts the level; handlers are not duplicated.
    """
    if stream is None:
        stream = sys.stderr

    fmt = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    have_stream = any(
        type(h) is logging.StreamHandler and getattr(h, "stream", None) is stream
        for h in root.handlers
    )
    if not have_stream:
        stream_handler = logging.StreamHandler(stream=stream)
        stream_handler.setFormatter(fmt)
        root.addHandler(stream_handler)

    if log_file is not None:
        log_file = os.path.abspath(log_file)
        have_file = any(
            isinstance(h, logging.FileHandler) and os.path.abspath(getattr(h, "baseFilename", "")) == log_file
            for h in root.handlers
        )
        if not have_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a")
            file_handler.setFormatter(fmt)
            root.addHandler(file_handler)

    return root
# endregion
