import math
from dataclasses import dataclass

from coord_dms.config import (
    LATITUDE_LABELS,
    LONGITUDE_LABELS,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    NEGATIVE_LABELS,
    RANGE_ERROR_MESSAGE,
)
from coord_dms.utils import logger


class RangeError(ValueError):
    """Raised when a latitude or longitude is outside its valid range."""


@dataclass
class DMS:
    """One coordinate axis in degrees, minutes and seconds."""

    degree: int = 0
    minutes: int = 0
    seconds: float = 0.0
    direction: str = ""

    def __str__(self):
        return self.string()

    def string(self):
        return f"{self.degree}°{self.minutes}'{self.seconds:.2f}\" {self.direction}"

    def string_rtl(self):
        return f"{self.direction} \"{self.seconds:.2f} '{self.minutes} °{self.degree}"

    def string_persian(self):
        return (
            f"{self.degree} درجه {self.minutes} دقیقه "
            f"{self.seconds:.2f} ثانیه{self.direction}"
        )


def decimal_to_dms(value, positive_label="", negative_label=""):
    """Split decimal degrees into a DMS, labelled by the sign of value.

    Zero counts as positive. Seconds keep their floating point residue.
    """
    magnitude = abs(value)
    degree = math.floor(magnitude)
    minutes = math.floor((magnitude - degree) * 60)
    seconds = (magnitude - degree - minutes / 60) * 3600
    direction = positive_label if value >= 0 else negative_label
    return DMS(degree=degree, minutes=minutes, seconds=seconds, direction=direction)


def new_coordinate(lat, lon):
    """Convert a latitude/longitude pair to a (latitude, longitude) DMS tuple."""
    if abs(lat) > MAX_LATITUDE or abs(lon) > MAX_LONGITUDE:
        logger.warning(f"Rejected coordinate lat={lat} lon={lon}")
        raise RangeError(RANGE_ERROR_MESSAGE)
    latitude = decimal_to_dms(lat, *LATITUDE_LABELS)
    longitude = decimal_to_dms(lon, *LONGITUDE_LABELS)
    logger.debug(f"Converted ({lat}, {lon}) to {latitude} {longitude}")
    return latitude, longitude


def dms_to_decimal(dms):
    """Return the unsigned decimal degrees of a DMS; direction is ignored."""
    return dms.degree + dms.minutes / 60 + dms.seconds / 3600


def dms_to_signed_decimal(dms):
    dd = dms_to_decimal(dms)
    return -dd if dms.direction in NEGATIVE_LABELS else dd


def coordinate_from_point(point):
    """Convert a shapely Point (x=lon, y=lat) to a (latitude, longitude) DMS tuple."""
    return new_coordinate(point.y, point.x)
