from sqlalchemy.exc import SQLAlchemyError
from structlog import get_logger
from lightbnb.config import settings
from lightbnb.db.store import Store
from lightbnb.queries.listing import ListingQueryBuilder
from lightbnb.schemas.property import FilterOptions, NewProperty
from lightbnb.schemas.user import NewUser
from lightbnb.services.result import QueryResult

logger = get_logger()

# Errors the store can surface: driver/query failures come wrapped by SQLAlchemy,
# an unreachable host shows up as OSError from the connect attempt.
STORE_ERRORS = (SQLAlchemyError, OSError)

USER_BY_EMAIL = """
SELECT *
FROM users
WHERE email = $1;
"""

USER_BY_ID = """
SELECT *
FROM users
WHERE id = $1;
"""

INSERT_USER = """
INSERT INTO users (name, email, password)
VALUES ($1, $2, $3)
RETURNING id;
"""

GUEST_RESERVATIONS = """
SELECT properties.*, reservations.start_date, reservations.end_date,
       avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2;
"""

INSERT_PROPERTY = """
INSERT INTO properties (
  title, description, owner_id, cover_photo_url, thumbnail_photo_url, cost_per_night,
  parking_spaces, number_of_bathrooms, number_of_bedrooms, active,
  province, city, country, street, post_code
)
VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15)
RETURNING id;
"""

class DataAccessService:
    """One statement per call against an injected store. Failures never raise;
    they come back as ``QueryResult.store_error`` after being logged.
    """

    def __init__(self, store: Store, builder: ListingQueryBuilder | None = None):
        self.store = store
        self.builder = builder or ListingQueryBuilder()

    async def _one(self, statement: str, params: list) -> QueryResult:
        try:
            row = await self.store.fetch_one(statement, params)
        except STORE_ERRORS as e:
            logger.error("Store query failed", statement=statement, error=str(e))
            return QueryResult.store_error(e)
        return QueryResult.from_row(row)

    async def _many(self, statement: str, params: list) -> QueryResult:
        try:
            rows = await self.store.fetch_all(statement, params)
        except STORE_ERRORS as e:
            logger.error("Store query failed", statement=statement, error=str(e))
            return QueryResult.store_error(e)
        return QueryResult.from_rows(rows)

    async def _insert(self, statement: str, params: list) -> QueryResult:
        try:
            row = await self.store.execute_returning(statement, params)
        except STORE_ERRORS as e:
            logger.error("Store insert failed", statement=statement, error=str(e))
            return QueryResult.store_error(e)
        return QueryResult.from_row(row)

    # Users

    async def get_user_by_email(self, email: str) -> QueryResult:
        return await self._one(USER_BY_EMAIL, [email])

    async def get_user_by_id(self, user_id) -> QueryResult:
        return await self._one(USER_BY_ID, [user_id])

    async def create_user(self, user: NewUser) -> QueryResult:
        result = await self._insert(INSERT_USER, [user.name, user.email, user.password])
        if result:
            logger.info("Created user", user_id=result.value["id"])
        return result

    # Reservations

    async def get_reservations_for_guest(self, guest_id, limit: int = settings.DEFAULT_RESULT_LIMIT) -> QueryResult:
        return await self._many(GUEST_RESERVATIONS, [guest_id, limit])

    # Properties

    async def list_properties(self, options: FilterOptions, limit: int = settings.DEFAULT_RESULT_LIMIT) -> QueryResult:
        statement, params = self.builder.build(options, limit)
        return await self._many(statement, params)

    async def create_property(self, prop: NewProperty) -> QueryResult:
        params = [
            prop.title, prop.description, prop.owner_id, prop.cover_photo_url,
            prop.thumbnail_photo_url, prop.cost_per_night, prop.parking_spaces,
            prop.number_of_bathrooms, prop.number_of_bedrooms, True,
            prop.province, prop.city, prop.country, prop.street, prop.post_code,
        ]
        result = await self._insert(INSERT_PROPERTY, params)
        if result:
            logger.info("Created property", property_id=result.value["id"], owner_id=prop.owner_id)
        return result
