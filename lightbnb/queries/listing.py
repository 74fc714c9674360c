import re
from decimal import Decimal, InvalidOperation
from structlog import get_logger
from lightbnb.config import settings
from lightbnb.queries.clauses import ClauseList
from lightbnb.schemas.property import FilterOptions

logger = get_logger()

LISTING_SELECT = """SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"""

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")

def parse_int(value):
    """Integer prefix of ``value`` the way JavaScript's parseInt reads it, or NaN.
    A leading ``0x`` switches to hex; only ASCII digits count.
    """
    if isinstance(value, bool):
        return float("nan")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return float("nan")
    match = _LEADING_INT.match(str(value))
    if not match:
        return float("nan")
    sign, hex_digits, digits = match.groups()
    if digits is None:
        if not hex_digits:
            return float("nan")
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number

def parse_decimal(value):
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return float("nan")
    if not number.is_finite():
        return float("nan")
    return number

def parse_rating(value):
    """Finite ratings as Decimal; anything else goes through as given.
    A NaN here would be a valid numeric to PostgreSQL and silently match nothing.
    """
    number = parse_decimal(value)
    return number if isinstance(number, Decimal) else value

def to_minor_units(value):
    """Major currency units to cents; integral amounts come back as int."""
    amount = parse_decimal(value)
    if not isinstance(amount, Decimal):
        return amount
    cents = amount * 100
    if cents == cents.to_integral_value():
        return int(cents)
    return cents

class ListingQueryBuilder:
    """Builds the property listing lookup from optional filters.

    WHERE conditions are checked in a fixed order (city, owner, min price,
    max price); the rating filter lands in HAVING after all of them, and the
    limit is always the last parameter.
    """

    def build(self, options: FilterOptions, limit: int = settings.DEFAULT_RESULT_LIMIT):
        query = ClauseList().add(LISTING_SELECT)

        if options.city:
            query.where("city LIKE {}", f"%{options.city}%")
        if options.owner_id:
            query.where("owner_id = {}", parse_int(options.owner_id))
        if options.minimum_price_per_night:
            query.where("cost_per_night >= {}", to_minor_units(options.minimum_price_per_night))
        if options.maximum_price_per_night:
            query.where("cost_per_night <= {}", to_minor_units(options.maximum_price_per_night))

        query.add("GROUP BY properties.id")
        if options.minimum_rating:
            query.add("HAVING avg(property_reviews.rating) > {}", parse_rating(options.minimum_rating))

        query.add("ORDER BY cost_per_night")
        query.add("LIMIT {}", limit)

        statement, params = query.render()
        logger.debug("Built listing query", statement=statement, params=params)
        return statement, params
