"""Fixed constants: epochs, time units, angle units, obliquity, zodiac tables."""

# Epochs
EPOCH_J2000 = 2451545.0  # Julian Date of 2000-01-01 12:00 UTC
UNIX_EPOCH_J2000 = 946728000  # Unix timestamp of 2000-01-01 12:00 UTC
# Day 0 of the lunar/solar element set: 2000 January 0.0 (1999-12-31 00:00 UTC).
UNIX_EPOCH_LUNAR = 946598400
DAYS_PER_JULIAN_CENTURY = 36525.0

# Time: seconds per unit (for interval conversion and calendar arithmetic)
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MONTHS_PER_YEAR = 12

# Days in each month of a common year (index 0 = January).
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
ARCSEC_PER_DEGREE = 3600
DEGREES_PER_SIGN = 30

# Mean obliquity of the ecliptic at J2000 (degrees), held fixed.
OBLIQUITY_DEG = 23.43928

# Kepler's equation: convergence tolerance on the residual (radians).
KEPLER_TOLERANCE = 1e-6

# Defaults and thresholds (configuration)
DEFAULT_INTERVAL = 1.0  # default time step for ephemeris tables
DEFAULT_MIN_INTERVAL_SECONDS = 1.0  # minimum interval for interval_seconds()
DEFAULT_FALLBACK_HOURS = 2  # per-minute DST search window, each side
DEFAULT_WIDE_FALLBACK_HOURS = 24  # degenerate search window, each side
DEFAULT_KEPLER_MAX_ITER = 100
MAX_EPHEMERIS_STEPS = 100000

ZODIAC_SIGNS = (
    'Aries',
    'Taurus',
    'Gemini',
    'Cancer',
    'Leo',
    'Virgo',
    'Libra',
    'Scorpio',
    'Sagittarius',
    'Capricorn',
    'Aquarius',
    'Pisces',
)
ZODIAC_SIGNS_SHORT = ('AR', 'TA', 'GE', 'CN', 'LE', 'VI', 'LI', 'SC', 'SG', 'CP', 'AQ', 'PI')
