"""Log configuration for the portal application."""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logger(level: int = logging.INFO, logfile: Optional[str] = None,
                 json: bool = True) -> logging.Logger:
    """Attach a (JSON) handler to the ``portal`` logger."""
    handler: logging.Handler
    if logfile:
        handler = logging.FileHandler(logfile)
    else:
        handler = logging.StreamHandler()
    if json:
        handler.setFormatter(jsonlogger.JsonFormatter(
            FORMAT,
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        ))
    else:
        handler.setFormatter(logging.Formatter(FORMAT))

    logger = logging.getLogger('portal')
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
