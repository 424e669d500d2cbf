"""422 responses for request bodies that fail validation."""

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Answer 422 without echoing the rejected input back.

    ``Infinity`` and ``NaN`` parse as JSON numbers but cannot be rendered in
    a JSON response, so the offending value is left out of each error.
    """
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})
