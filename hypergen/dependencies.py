from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hypergen.core.controller import RequestController


def get_controller(request: Request) -> RequestController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Generation is not running.")
    return controller


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        first_error = exc.errors()[0]["msg"] if exc.errors() else "Invalid request"
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "message": first_error,
                    "type": "invalid_request_error",
                }
            },
        )
