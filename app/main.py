# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.api import api_router
from app.api.routers import health
from app.data.database import Base, engine
from app.domain.errors import ServerError, ShopError
from app.utils.settings import PORT
from app.utils.logging import get_logger

# import modeli, zeby byly w Base.metadata przed create_all
from app.data import models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Failed to create tables")
        raise
    logger.info(f"API docs at http://localhost:{PORT}/api-docs")
    yield


# wszystkie bledy wychodza jako {"message": ...}

async def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # bez "input", w body moga byc hasla
    errors = [
        {"loc": e.get("loc"), "type": e.get("type"), "msg": e.get("msg")}
        for e in exc.errors()
    ]
    logger.info(f"Rejected request on {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"message": "Bad request"})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=ServerError.status_code, content={"message": ServerError.message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=ServerError.status_code, content={"message": ServerError.message})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop API",
        version="1.0.0",
        description="Auth, products, cart and orders",
        docs_url="/api-docs",
        openapi_url="/api-docs.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def root():
        return "API is running..."

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
