import logging
import math

from coord_dms.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def round_half_up(value):
    """Round to the nearest whole number, halves away from zero."""
    if value < 0:
        return -round_half_up(-value)
    whole = math.floor(value)
    return whole + (1 if value - whole >= 0.5 else 0)
