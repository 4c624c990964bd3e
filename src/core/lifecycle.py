"""
Parameter set lifecycle - releasing owned attachments.
"""

import logging

from schemas.parameters import ParameterSet

logger = logging.getLogger(__name__)


def destroy(target: ParameterSet) -> None:
    """
    Release every owned string and sub-object of a parameter set.

    Safe on a default-initialized set and on one already destroyed; the
    second call does nothing. The set is not meant to be used afterwards.

    Args:
        target: Parameter set to release
    """
    if target.destroyed:
        logger.debug("Parameter set already destroyed")
        return

    released = 0
    for name in ParameterSet.OWNED_OBJECTS:
        if getattr(target, name) is not None:
            setattr(target, name, None)
            released += 1

    for name in ParameterSet.OWNED_STRINGS:
        setattr(target, name, "")

    target._destroyed = True
    logger.debug(f"Parameter set destroyed ({released} sub-objects released)")
