import logging
import os
import sys
import uuid

import structlog


# Ties together every event emitted by one load.
run_code = str(uuid.uuid4())

LOG_LEVEL = os.getenv("MOVIE_SQL_LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"


def add_run_code(logger, method_name, event_dict) -> dict:
    event_dict["run_code"] = run_code
    return event_dict


structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_run_code,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(LOG_LEVEL)
    ),
    # stdout carries the stats command's output
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)
log = structlog.get_logger()
