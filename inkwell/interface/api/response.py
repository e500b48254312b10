"""Response envelope.

Every response body has the shape ``{"success", "message", "data"}``;
``data`` is omitted when there is nothing to return.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def _to_data(data: Any) -> Any:
    if isinstance(data, BaseModel):
        # Unset optional fields (e.g. replies on a non-nested page) are omitted
        return data.model_dump(mode="json", exclude_unset=True)
    return jsonable_encoder(data)


def success(
    message: str, data: Any = None, status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Build a success envelope."""
    content: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        content["data"] = _to_data(data)
    return JSONResponse(status_code=status_code, content=content)


def failure(message: str, status_code: int, details: Any = None) -> JSONResponse:
    """Build a failure envelope."""
    content: dict[str, Any] = {"success": False, "message": message}
    if details is not None:
        content["data"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content)
