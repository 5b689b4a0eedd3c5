"""Logging setup for the Lambda process."""

import logging
import sys
from typing import Optional

from pydantic import BaseModel

PACKAGE = "patient_lambdas"
QUIET = ("boto3", "botocore", "urllib3")


class LogConfig(BaseModel):
    level: str = "INFO"
    # the Lambda runtime prefixes its own timestamp and request id
    format: str = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: Optional[LogConfig] = None) -> None:
    """Route package logs to stdout at the configured level.

    Called once per process from ``runtime.get_service`` with the level taken
    from ``Settings.LOG_LEVEL``.
    """
    config = config or LogConfig()

    logging.basicConfig(format=config.format, stream=sys.stdout, force=True)
    logging.getLogger(PACKAGE).setLevel(config.level.upper())
    for name in QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
