"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roomplan.application.catalog import CatalogItemNotFoundError
from roomplan.application.config.loader import ConfigError
from roomplan.application.library import DesignNotFoundError


class SessionNotFoundError(Exception):
    """Raised when a session id is not in the registry."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"session_id": exc.session_id},
            },
        )

    @app.exception_handler(DesignNotFoundError)
    async def design_not_found_handler(
        request: Request, exc: DesignNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"design_id": exc.design_id},
            },
        )

    @app.exception_handler(CatalogItemNotFoundError)
    async def catalog_item_not_found_handler(
        request: Request, exc: CatalogItemNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"type": exc.type_name},
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        # Impossible values rejected by the domain (e.g. scale <= 0)
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_value",
                "details": None,
            },
        )
