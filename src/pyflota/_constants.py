"""Internal constants shared across the library.

Distributions are fixed; none of these are read from configuration.
"""

BASE_LATITUDE = 20.659699
BASE_LONGITUDE = -103.349609

# ------------------------------------------------------------------
# Scalar draw offsets (one per attribute, never shared)
# ------------------------------------------------------------------

OFFSET_TEMPLATE = 0
OFFSET_TAG = 7_919
OFFSET_ASSIGNEE = 15_737
OFFSET_EVENT_LAT = 23_333
OFFSET_EVENT_LNG = 31_337

OFFSET_LOCATION_KIND = 41_017
OFFSET_GEOFENCE = 48_611
OFFSET_STREET = 56_503
OFFSET_NEIGHBORHOOD = 64_403
OFFSET_STREET_NUMBER = 72_337

OFFSET_START_INDEX = 81_203
OFFSET_MULTI_DAY = 89_041
OFFSET_ENDS_ON_ROUTE = 96_959
OFFSET_POINTS_AHEAD = 104_729
OFFSET_EXTRA_MINUTES = 112_643
OFFSET_OFF_ROUTE_MINUTES = 120_587
OFFSET_MULTI_DAY_MAGNITUDE = 128_521
OFFSET_MULTI_DAY_BEARING = 136_463
OFFSET_MULTI_DAY_HOURS = 144_409
OFFSET_NEAR_LAT = 152_363
OFFSET_NEAR_LNG = 160_319
OFFSET_FREE_START_LAT = 168_281
OFFSET_FREE_START_LNG = 176_243
OFFSET_FREE_END_LAT = 184_211
OFFSET_FREE_END_LNG = 192_181
OFFSET_FREE_MINUTES = 200_153

# Added to the seed (not the offset) so the end name is an independent draw.
END_LOCATION_SEED_OFFSET = 1000

# ------------------------------------------------------------------
# Thresholds
# ------------------------------------------------------------------

STATUS_SEED_MULTIPLIER = 11
STATUS_OPEN_CUT = 0.40
STATUS_IN_PROGRESS_CUT = 0.70

ADDRESS_PROBABILITY = 0.25
MULTI_DAY_PROBABILITY = 0.20
ENDS_ON_ROUTE_PROBABILITY = 0.70

# ------------------------------------------------------------------
# Lifecycle shape
# ------------------------------------------------------------------

MINUTES_PER_ROUTE_POINT = 2
START_WINDOW_FRACTION = 0.7

FREE_OFFSET_SPAN_DEG = 0.12
NEAR_OFFSET_SPAN_DEG = 0.08
EVENT_OFFSET_SPAN_DEG = 0.1

MULTI_DAY_MIN_M = 2_000
MULTI_DAY_SPAN_M = 6_000

STREET_NUMBER_MIN = 1000
STREET_NUMBER_MAX = 9999

# ------------------------------------------------------------------
# Fleet roster
# ------------------------------------------------------------------

FLEET_SEED = 12345
FLEET_SIZE = 15

VEHICLE_OFFSET_LAT = 100
VEHICLE_OFFSET_LNG = 200
VEHICLE_OFFSET_TAG = 300
VEHICLE_OFFSET_ASSIGNEE = 400
VEHICLE_OFFSET_STATE = 500
VEHICLE_OFFSET_HEADING = 600
VEHICLE_OFFSET_LAST_REPORT = 700

REPORT_RECENT_MAX_MINUTES = 30
REPORT_WARNING_MAX_MINUTES = 60

# ------------------------------------------------------------------
# Entity IDs
# ------------------------------------------------------------------

# Larger index or date fragments parse as malformed.
MAX_ID_COMPONENT = 2**31 - 1
