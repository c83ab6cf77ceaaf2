import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from api_catalog.router.router import router as api_catalog_router
from api_catalog.config.config import engine, Base, check_connection, HOST, PORT
from api_catalog.config.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Any failure here aborts startup
    check_connection(engine)
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title="Music Catalog API",
    description="CRUD backend for albums, singers, categories and songs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every failure surfaces the same way: a 500 with a short detail string
@app.exception_handler(RequestValidationError)
async def request_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Invalid request body"},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


app.include_router(api_catalog_router)

if __name__ == "__main__":
    import uvicorn

    logger.info("Listening on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
