"""Logging setup for the contract package.

Checks log each violation at DEBUG on their module logger just before
raising. This module applies a resolved config to the package logger so
applications can surface those records.
"""

import logging
from typing import Optional

from contract.schemas import ContractConfig, resolve_config

PACKAGE_LOGGER = "contract"

FORMATTER = logging.Formatter(
    fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def configure_logging(config: Optional[ContractConfig] = None) -> logging.Logger:
    """Apply logging settings to the ``contract`` package logger.

    Parameters
    ----------
    config : ContractConfig, optional
        Resolved configuration. Defaults to ``resolve_config()``.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    if config is None:
        config = resolve_config()

    log_level = getattr(logging, config.logging.level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Drop handlers from earlier calls
    for handler in logger.handlers[:]:
        if getattr(handler, "_contract_handler", False):
            logger.removeHandler(handler)

    if config.logging.attach_handler:
        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(FORMATTER)
        ch._contract_handler = True
        logger.addHandler(ch)

    logger.debug("Logging: level=%s, handler=%s", config.logging.level, config.logging.attach_handler)
    return logger
