""" Logger of codebase-guidelines, writing to standard error at the bundled ``LOG_LEVEL``. """

import logging
import codebase_guidelines.config as config


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str = "codebase_guidelines") -> logging.Logger:
    """
    Return the logger ``name``, attaching a standard error handler on first use.

    At the default ``WARNING`` level the copy progress, logged at DEBUG, stays
    out of the command output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(str(config.LOG_LEVEL).upper())
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


logger = get_logger()
