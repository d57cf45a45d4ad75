"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_STANDARD_ALLOWANCE = 4167
DEFAULT_PROFESSIONAL_TAX = 200
DEFAULT_PF_RATE = Decimal("0.12")
DEFAULT_BONUS_RATE = Decimal("0.0833")
DEFAULT_LTA_RATE = Decimal("0.0833")
DEFAULT_HRA_RATE = Decimal("0.5")
DEFAULT_BASIC_RATE = Decimal("0.5")

# Fixed month length used for pro-ration, independent of the calendar.
DEFAULT_TOTAL_WORKING_DAYS = 30
DEFAULT_STANDARD_HOURS_PER_DAY = 8


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
