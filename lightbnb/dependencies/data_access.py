from fastapi import HTTPException, Request
from lightbnb.services.data_access import DataAccessService
from lightbnb.services.result import QueryResult
from structlog import get_logger

logger = get_logger()

def get_data_access(request: Request) -> DataAccessService:
    """Service bound to the store the app created at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    return DataAccessService(store)

def raise_for_store_error(result: QueryResult, what: str):
    if result.is_error:
        logger.error("Store error surfaced to client", what=what, error=str(result.error))
        raise HTTPException(status_code=502, detail=f"Error fetching {what}")
