# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import SessionLocal, init_db
from seed import seed_products
from utils.exceptions import StoreError, store_error_handler, validation_error_handler

# Routers
from routes.auth import router as auth_router
from routes.products import router as products_router
from routes.orders import router as orders_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables and the starter catalog
    init_db()
    if settings.SEED_PRODUCTS:
        db = SessionLocal()
        try:
            seed_products(db)
        finally:
            db.close()
    logger.info("FreshCart API ready")
    yield


app = FastAPI(title="FreshCart API", version="1.0.0", lifespan=lifespan)

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StoreError, store_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Router registration
app.include_router(auth_router)
app.include_router(products_router)
app.include_router(orders_router)

@app.get("/")
def read_root():
    return {"message": "FreshCart API is running"}
