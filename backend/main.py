import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from db.store import create_store
from routers.brands import router as brands_router
from routers.comparisons import router as comparisons_router
from routers.devices import router as devices_router
from services.catalog_repository import CatalogRepository

load_dotenv()

# --------------------------------------------------
# LOGGING
# --------------------------------------------------
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


# --------------------------------------------------
# ERROR HANDLERS
# --------------------------------------------------
async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def _unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# --------------------------------------------------
# APP
# --------------------------------------------------
def create_app(store: CatalogRepository | None = None) -> FastAPI:
    app = FastAPI(
        title="Phone Catalog API",
        version="1.0.0",
        swagger_ui_parameters={"displayRequestDuration": True},
    )
    # one store per process, handed to routes through db.deps.get_store
    app.state.store = store if store is not None else create_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(devices_router)
    app.include_router(brands_router)
    app.include_router(comparisons_router)

    @app.options("/{path:path}")
    def preflight(path: str):
        return Response(status_code=204)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/")
    def root():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
    )
