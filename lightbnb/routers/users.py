from fastapi import APIRouter, Depends, HTTPException
from lightbnb.dependencies.data_access import get_data_access, raise_for_store_error
from lightbnb.schemas.property import CreatedResponse
from lightbnb.schemas.user import NewUser, UserResponse
from lightbnb.services.data_access import DataAccessService
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=CreatedResponse)
async def create_user(user: NewUser, service: DataAccessService = Depends(get_data_access)):
    result = await service.create_user(user)
    raise_for_store_error(result, "user")
    return result.value

@router.get("", response_model=UserResponse)
async def get_user_by_email(email: str, service: DataAccessService = Depends(get_data_access)):
    result = await service.get_user_by_email(email)
    raise_for_store_error(result, "user")
    if not result:
        raise HTTPException(status_code=404, detail="User not found")
    return result.value

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: DataAccessService = Depends(get_data_access)):
    result = await service.get_user_by_id(user_id)
    raise_for_store_error(result, "user")
    if not result:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("Fetched user", user_id=user_id)
    return result.value
