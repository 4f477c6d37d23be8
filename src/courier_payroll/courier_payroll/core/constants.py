"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_PROFIT_PER_PACKET = Decimal("50")
DEFAULT_PROFIT_PER_PICKUP = Decimal("0")
DEFAULT_CURRENCY = "INR"
DEFAULT_COMPANY_NAME = "Courier Company"

DEFAULT_BASE_SALARY = Decimal("15000")
DEFAULT_COMMISSION_PER_PACKET = Decimal("10")

NO_ACHIEVEMENT_LEVEL = "None"
MONEY_QUANT = Decimal("0.01")

ISO_DATE_FORMAT = "%Y-%m-%d"

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
