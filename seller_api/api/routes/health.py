from fastapi import APIRouter
from seller_api.config import settings

router = APIRouter()

@router.get("/")
def health_check():
    return {"status": "healthy", "backend": settings.BACKEND_API_URL}
