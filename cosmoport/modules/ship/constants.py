"""Ship module constants — field limits and rating coefficients."""

# Name / planet length (characters)
MAX_STRING_LENGTH = 50

# Speed range (inclusive)
MIN_SPEED = 0.01
MAX_SPEED = 0.99

# Crew size range (inclusive)
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

# Production year range (exclusive on both ends)
MIN_PROD_YEAR_EXCLUSIVE = 2800
MAX_PROD_YEAR_EXCLUSIVE = 3100

# Rating formula
RATING_SPEED_FACTOR = 80
USED_SHIP_COEFFICIENT = 0.5
NEW_SHIP_COEFFICIENT = 1.0

# Canonical order in which fields are validated and reported
VALIDATED_FIELDS = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")

# Fields whose change forces a rating recomputation
RATING_FIELDS = frozenset({"prod_date", "speed", "is_used"})
