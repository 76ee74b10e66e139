"""
Authentication Routes

Every route in this group sits behind the bearer-token gate.

GET /auth/verify - Return the identity attached by the gate
"""

from fastapi import APIRouter, Depends

from cohort_api.core.auth import get_current_user

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/verify")
async def verify(user: dict = Depends(get_current_user)):
    """Get the token payload of the authenticated caller."""
    return user
