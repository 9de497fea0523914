"""Dice API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application


class RollResponse(BaseModel):
    """Response model for a single throw."""

    first_die: int
    second_die: int
    total: int


class RollManyResponse(BaseModel):
    """Response model for a batch of throws."""

    count: int
    roll_total: int
    total_throws: int


class ClearResponse(BaseModel):
    """Response model for clearing the running total."""

    roll_total: int


def create_dice_router(app: Application) -> APIRouter:
    """Create dice router."""
    router = APIRouter(prefix="/api/dice", tags=["dice"])

    @router.post("/roll", response_model=RollResponse)
    async def roll() -> dict:
        """Throw two dice once."""
        try:
            result = app.dice.get_dice_throw()
            return {
                "first_die": result.first_die,
                "second_die": result.second_die,
                "total": result.total,
            }
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/roll-many", response_model=RollManyResponse)
    async def roll_many(count: int = Query(100, ge=1, le=10000)) -> dict:
        """Throw the dice count times and add to the running total."""
        try:
            roll_total = app.roll_many(count)
            return {
                "count": count,
                "roll_total": roll_total,
                "total_throws": app.dice.total_throws,
            }
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/clear", response_model=ClearResponse)
    async def clear() -> dict:
        """Reset the running total."""
        try:
            await app.reset()
            return {"roll_total": app.roll_total}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/divide-by-zero")
    async def divide_by_zero() -> dict:
        """Trigger an unhandled ZeroDivisionError."""
        return {"result": app.dice.divide_by_zero()}

    return router
