"""
RPi Camera Parameters - control loop host

Builds the startup parameter set, then applies each line of the control
stream (stdin by default) as one control buffer. A rejected buffer is
logged and the loop carries on with the next one.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO

from common.constants import SystemConstants
from config import Settings, get_settings
from core.environment_loader import EnvironmentLoader
from core.error_channel import ErrorChannel
from core.exceptions import DecodeException, ParameterException
from core.lifecycle import destroy
from core.wire_parser import WireFormatParser
from schemas.parameters import ParameterSet

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if settings.system.log_file:
        handlers.append(
            RotatingFileHandler(
                settings.system.log_file,
                maxBytes=SystemConstants.LOG_FILE_MAX_BYTES,
                backupCount=SystemConstants.LOG_FILE_BACKUP_COUNT,
            )
        )

    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=settings.system.log_format,
        handlers=handlers,
        force=True,
    )


def load_startup_parameters(settings: Settings) -> ParameterSet:
    """Build the baseline parameter set the capture pipeline starts with."""
    if settings.control.startup_from_environment:
        return EnvironmentLoader().load()

    logger.info("Starting from path defaults")
    return ParameterSet.with_defaults()


def run_control_loop(stream: TextIO, params: ParameterSet, parser: WireFormatParser) -> int:
    """
    Apply control buffers read line by line.

    Args:
        stream: Text stream with one control buffer per line
        params: Live parameter set to update
        parser: Parser used for every buffer

    Returns:
        Number of rejected buffers
    """
    rejected = 0
    for line in stream:
        buffer = line.rstrip("\r\n")
        if not buffer:
            continue

        try:
            parser.apply(buffer, params)
        except DecodeException:
            rejected += 1
            logger.error(f"Control buffer rejected: {parser.last_error}")
            continue

        logger.debug(f"Control buffer applied: {buffer}")

    return rejected


def main(stream: Optional[TextIO] = None) -> int:
    """Entry point: returns the process exit status."""
    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting camera parameter control loop...")

    try:
        params = load_startup_parameters(settings)
    except ParameterException as e:
        logger.critical(f"Startup failed: {e.message}")
        return 1

    parser = WireFormatParser(error_channel=ErrorChannel(settings.control.error_buffer_size))
    try:
        rejected = run_control_loop(stream if stream is not None else sys.stdin, params, parser)
    finally:
        destroy(params)

    logger.info(f"Control loop finished ({rejected} buffers rejected)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
