import logging

from app.api.api_v1.api import api_router
from app.core.config import settings
from app.db.repository import RepositoryError
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    redirect_slashes=False,  # Prevent 307 redirects that break CORS
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    return JSONResponse(
        status_code=503, content={"detail": "Database temporarily unavailable"}
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Strongs Brazil Portal API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
