import os

from dotenv import load_dotenv

load_dotenv()

# Constants
MAX_LATITUDE = 90
MAX_LONGITUDE = 180
LATITUDE_LABELS = ("N", "S")
LONGITUDE_LABELS = ("E", "W")
NEGATIVE_LABELS = ("S", "W")
RANGE_ERROR_MESSAGE = "invalid latitude or longitude value"
LOG_LEVEL = os.getenv("COORD_DMS_LOG_LEVEL", "INFO")
