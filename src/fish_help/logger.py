import os
import logging

# Configuration comes from the environment, read once at import
log_file = os.getenv("LOG_FILE")  # optional; an existing file is required
log_level_env = os.getenv("LOG_LEVEL", "0")

# "0" sits above CRITICAL: nothing is emitted
_level_map = {"0": logging.CRITICAL + 1, "1": logging.INFO, "2": logging.DEBUG}
log_level = _level_map.get(log_level_env, logging.CRITICAL + 1)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

kwargs = dict(level=log_level, format=LOG_FORMAT)

if log_file:
    kwargs.update(filename=log_file, filemode="r+")   # never create the file

logging.basicConfig(**kwargs)


def get_logger(name: str):
    """
    Return a logger tagged with the given module name.

    Usage:
        from fish_help.logger import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
