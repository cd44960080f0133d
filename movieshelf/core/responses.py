# movieshelf/core/responses.py

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(
    message: str,
    data: Any = None,
    page: Optional[int] = None,
    size: Optional[int] = None,
    total: Optional[int] = None,
    status_code: int = 200,
) -> JSONResponse:
    """Success envelope"""
    body = {"status": "success", "message": message, "data": data}
    if page is not None:
        body["page"] = page
    if size is not None:
        body["size"] = size
    if total is not None:
        body["total"] = total
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error(message: str, code: str, status_code: int, errors: Any = None) -> JSONResponse:
    """Error envelope"""
    body = {"message": message, "code": code, "statusCode": status_code}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
