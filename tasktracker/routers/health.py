from fastapi import APIRouter
from tasktracker.schemas.task import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return {"status": "OK", "message": "Task tracker API is running"}
