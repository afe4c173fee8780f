"""
Logging configuration for applications embedding tsreshape.

The library itself only creates module loggers; call setup_logging() from an
application entry point to get console (and optionally rotating file) output.
"""

import logging
import logging.handlers
from typing import Optional

from .config import Config, config as default_config


def setup_logging(
    logger_name: str = "tsreshape",
    settings: Optional[Config] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.
    
    Args:
        logger_name: Name of the logger (the package name covers every module)
        settings: Config to read level and file options from (global config by default)
    
    Returns:
        Configured logger instance
    """
    settings = settings or default_config
    logger = logging.getLogger(logger_name)
    
    # Don't add handlers if logger already configured
    if logger.handlers:
        return logger
    
    logger.setLevel(settings.log_level)
    
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if settings.log_to_file:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = settings.logs_dir / f"{logger_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(settings.log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger
