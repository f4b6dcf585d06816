# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import logging
import os
import sys

from loguru import logger

__all__ = ["logger", "configure_logging"]

PACKAGE_NAME = "oidc_sweden"


class InterceptHandler(logging.Handler):
    """
    Redirects standard logging messages to Loguru.
    Ensures libraries using standard logging are captured uniformly.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # type: ignore[assignment]

        # Walk back to the frame that issued the standard logging call
        frame = logging.currentframe()
        depth = 2
        while frame and (
            frame.f_code.co_filename == logging.__file__
            or frame.f_code.co_filename == __file__
        ):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(intercept_std_logging: bool = False) -> None:
    """
    Configures the logger based on environment variables and enables
    log output from this package.

    Environment:
        OIDC_SWEDEN_LOG_LEVEL: Minimum level (default INFO).
        OIDC_SWEDEN_LOG_JSON: "true" for JSON lines on stdout, otherwise text on stderr.
        OIDC_SWEDEN_LOG_FILE: Optional path of a rotating JSON log file.

    Args:
        intercept_std_logging: Also route the standard logging module through Loguru.
    """
    log_level = os.getenv("OIDC_SWEDEN_LOG_LEVEL", "INFO").upper()
    log_json = os.getenv("OIDC_SWEDEN_LOG_JSON", "false").lower() == "true"
    log_file = os.getenv("OIDC_SWEDEN_LOG_FILE")

    try:
        logger.level(log_level)
    except ValueError:
        log_level = "INFO"

    logger.configure(handlers=[])

    if log_json:
        logger.add(
            sys.stdout,
            level=log_level,
            serialize=True,
        )
    else:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stderr,
            level=log_level,
            format=format_str,
        )

    if log_file:
        # Always JSON for file to allow structured analysis later
        logger.add(
            log_file,
            rotation="100 MB",
            retention="10 days",
            serialize=True,
            level=log_level,
        )

    if intercept_std_logging:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
        numeric_level = logging.getLevelName(log_level)
        if isinstance(numeric_level, int):
            logging.getLogger().setLevel(numeric_level)
        else:
            logging.getLogger().setLevel(logging.INFO)

    logger.enable(PACKAGE_NAME)


# A library stays silent until the application opts in
logger.disable(PACKAGE_NAME)
