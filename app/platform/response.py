from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    data: Optional[Any] = None,
    message: str = "Operation successful",
    status_code: int = status.HTTP_200_OK,
    title: Optional[str] = None,
) -> JSONResponse:
    """
    Envelope shared by every endpoint.
    status is "success" below 400 and "error" otherwise. `title` is the short
    heading a client shows next to the message (e.g. "Invalid URL").
    """
    status_str = "success" if status_code < 400 else "error"
    data = jsonable_encoder(data) if data is not None else {}

    content = {
        "status_code": status_code,
        "status": status_str,
        "message": message,
        "data": data,
    }
    if title:
        content["title"] = title

    return JSONResponse(status_code=status_code, content=content)
