import logging
from fastapi import FastAPI
from seller_api.api.router import api_router
from seller_api.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Seller Product Service")

app.include_router(api_router)

@app.get("/")
def root():
    return {"status": "running", "message": "Seller Product Service"}
