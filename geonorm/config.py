"""Global constants and type definitions for coordinate normalization.

This module centralizes the fixed physical constants, rounding precisions
and CSV schema used across the package. Every value here is read-only after
import; nothing in the package mutates them, which keeps parsing, distance
and proximity evaluation reentrant.

Type Definitions:
    BASE_TYPE: Union type for numeric inputs accepted by vectorized helpers.
               Supports Python scalars and NumPy arrays so the Haversine
               kernel can be applied to whole columns at once.

Example:
    >>> from geonorm.config import EARTH_RADIUS_KM, KM_TO_MILES
    >>> round(100 * KM_TO_MILES, 2)
    62.14
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

# Spherical Earth model
EARTH_RADIUS_KM = 6371.0  # km
KM_TO_MILES = 0.621371

# Nearness tolerance in decimal degrees (~0.11 m at the equator)
DEFAULT_TOLERANCE_DEG = 1e-6

# Axis bounds in degrees
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

# Output precision
DD_OUTPUT_DECIMALS = 6
DISTANCE_DECIMALS = 2
DMS_SECONDS_DECIMALS = 1
DDM_MINUTES_DECIMALS = 1
MAX_ROUND_DECIMALS = 10

# CSV schema
REQUIRED_HEADERS = ("name_a", "lat_a", "lon_a", "name_b", "lat_b", "lon_b")

OUTPUT_COLUMNS = (
    "id",
    "name_a",
    "lat_a_in",
    "lon_a_in",
    "lat_a_dd",
    "lon_a_dd",
    "lat_a_dms",
    "lon_a_dms",
    "name_b",
    "lat_b_in",
    "lon_b_in",
    "lat_b_dd",
    "lon_b_dd",
    "lat_b_dms",
    "lon_b_dms",
    "distance_km",
    "distance_miles",
    "nearly_lat",
    "nearly_lon",
    "nearly_both",
)
