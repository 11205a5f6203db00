"""Logging utilities for EchoNest modules."""

import logging

from echonest.config.settings import Config

def setup_logger(name=Config.LOGGER_NAME, level=logging.INFO):
    """Create and configure logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Console handler
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(ch)
    
    return logger

def add_file_handler(logger, log_path):
    """Add file handler to existing logger."""
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s: %(message)s")
    )
    logger.addHandler(fh)
    return logger
