import logging

NUMERICS = 15


class LCSRLogger(logging.Logger):
    """Logger with an additional ``numerics`` level between DEBUG and INFO."""

    def numerics(self, msg, *args, **kwargs):
        if self.isEnabledFor(NUMERICS):
            self._log(NUMERICS, msg, args, **kwargs)


logging.addLevelName(NUMERICS, "NUMERICS")


def lcsr_logger(name: str = __name__) -> LCSRLogger:
    """
    Returns the logger used throughout the package.

    Parameters
    ----------
    name : str, optional
        Name of the logger, usually the ``__name__`` of the calling module.

    Returns
    -------
    LCSRLogger
        A logger which knows the ``numerics`` level.

    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(LCSRLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    if not isinstance(logger, LCSRLogger):
        # the logger existed before with the default class
        logger.__class__ = LCSRLogger
    return logger


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Configures the ``lcsrpy`` logger hierarchy.

    Args:
        level: Logging level, e.g. ``logging.DEBUG`` or ``NUMERICS``.
        log_file: Optional path to additionally write the log to.
    """
    logger = lcsr_logger("lcsrpy")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
