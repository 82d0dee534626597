"""Users Router — POST /api/users.

Invariants:
    - Body validated by UserCreate before the controller runs (400 otherwise)
    - Readiness checked only after validation: a malformed body is 400 even when the store is down
    - Failures surface through the global TaskApiError handler
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.controllers.users import create_user
from taskapi.infrastructure.database import get_db, require_ready
from taskapi.schemas.envelope import ERROR_RESPONSES, UserEnvelope
from taskapi.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserEnvelope,
    status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES,
)
async def post_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user."""
    require_ready()
    user = await create_user(db, body)
    return UserEnvelope(payload=UserResponse.model_validate(user))
