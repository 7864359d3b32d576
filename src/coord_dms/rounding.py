import math

from coord_dms.utils import logger, round_half_up


def _normalize(dms):
    if dms.seconds >= 60:
        dms.seconds -= 60
        dms.minutes += 1
    if dms.minutes >= 60:
        dms.minutes -= 60
        dms.degree += 1
    return dms


def round_to_minute(dms):
    """Round the seconds field to a whole number and carry any overflow."""
    dms.seconds = float(round_half_up(dms.seconds))
    return _normalize(dms)


def round_to_second(dms):
    """Round seconds with a +0.5 bias and carry any overflow."""
    dms.seconds = float(round_half_up(dms.seconds + 0.5))
    return _normalize(dms)


def round_to_degree(dms):
    """Round to the nearest whole degree; 29'30" rounds up."""
    if dms.minutes >= 30 or (dms.minutes == 29 and dms.seconds >= 30):
        dms.degree += 1
    dms.minutes = 0
    dms.seconds = 0.0
    logger.debug(f"Rounded to degree: {dms}")
    return dms


def round_decimal_to_minute(value):
    """Round decimal degrees to the nearest whole minute."""
    degree = math.floor(value)
    minutes = (value - degree) * 60
    return degree + round_half_up(minutes) / 60


def round_decimal_to_second(value):
    """Round decimal degrees to the nearest whole second."""
    degree = math.floor(value)
    minutes = math.floor((value - degree) * 60)
    seconds = (value - degree - minutes / 60) * 3600
    return degree + (minutes + round_half_up(seconds) / 60) / 60
