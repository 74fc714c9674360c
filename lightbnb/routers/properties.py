from fastapi import APIRouter, Depends
from typing import Optional
from lightbnb.config import settings
from lightbnb.dependencies.data_access import get_data_access, raise_for_store_error
from lightbnb.schemas.property import CreatedResponse, FilterOptions, NewProperty, PropertyListResponse
from lightbnb.services.data_access import DataAccessService
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/api/properties", tags=["properties"])

@router.get("", response_model=PropertyListResponse)
async def list_properties(
    city: Optional[str] = None,
    owner_id: Optional[str] = None,
    minimum_price_per_night: Optional[str] = None,
    maximum_price_per_night: Optional[str] = None,
    minimum_rating: Optional[str] = None,
    limit: int = settings.DEFAULT_RESULT_LIMIT,
    service: DataAccessService = Depends(get_data_access),
):
    """
    Property listings with average rating, cheapest first.
    Filter values are forwarded as given; the query builder does the parsing.
    """
    options = FilterOptions(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating,
    )
    result = await service.list_properties(options, limit)
    raise_for_store_error(result, "properties")
    logger.info("Fetched properties", count=len(result.rows))
    return {"properties": result.rows}

@router.post("", response_model=CreatedResponse)
async def create_property(prop: NewProperty, service: DataAccessService = Depends(get_data_access)):
    result = await service.create_property(prop)
    raise_for_store_error(result, "property")
    return result.value
