from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_psokit_logging(*, level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a console handler to the "psokit" logger.

    Library modules never call logging.basicConfig(); applications opt in here.
    Nothing is attached when the root logger or the "psokit" logger already
    has handlers, so an existing logging setup is left untouched.

    Returns the "psokit" logger.
    """
    root = logging.getLogger()
    psokit_logger = logging.getLogger("psokit")

    if root.handlers or psokit_logger.handlers:
        return psokit_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    psokit_logger.addHandler(handler)
    psokit_logger.setLevel(level)
    psokit_logger.propagate = False
    return psokit_logger


__all__ = ["DEFAULT_FORMAT", "configure_psokit_logging"]
