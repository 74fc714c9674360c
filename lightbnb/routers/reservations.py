from fastapi import APIRouter, Depends
from lightbnb.config import settings
from lightbnb.dependencies.data_access import get_data_access, raise_for_store_error
from lightbnb.schemas.property import ReservationListResponse
from lightbnb.services.data_access import DataAccessService
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/api/reservations", tags=["reservations"])

@router.get("/{guest_id}", response_model=ReservationListResponse)
async def list_reservations(
    guest_id: int,
    limit: int = settings.DEFAULT_RESULT_LIMIT,
    service: DataAccessService = Depends(get_data_access),
):
    result = await service.get_reservations_for_guest(guest_id, limit)
    raise_for_store_error(result, "reservations")
    logger.info("Fetched reservations", guest_id=guest_id, count=len(result.rows))
    return {"reservations": result.rows}
