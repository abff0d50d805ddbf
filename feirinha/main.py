import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from feirinha.config import settings
from feirinha.database import engine, Base
from feirinha.errors import register_exception_handlers
from feirinha.items.router import router as item_router
from feirinha.products.router import router as product_router
from feirinha.payments.router import router as payment_router
from feirinha.sales.router import router as sales_router


# LOGGING CONFIGURATION

if settings.LOG_FILE:
    logger.add(settings.LOG_FILE, rotation=settings.LOG_ROTATION, level=settings.LOG_LEVEL)


# Database startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup")
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("Application shutdown")


# Create app
app = FastAPI(
    title="Feirinha POS",
    description="Point of sale API for market vendors: products, payment methods, sales and daily summary.",
    version="1.0.0",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# Routers
app.include_router(item_router, prefix="/items", tags=["Items"])
app.include_router(product_router, prefix="/products", tags=["Products"])
app.include_router(payment_router, prefix="/payments", tags=["Payments"])
app.include_router(sales_router, prefix="/sales", tags=["Sales"])


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("feirinha.main:app", host="0.0.0.0", port=8000)
