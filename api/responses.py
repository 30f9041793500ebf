# api/responses.py
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from bookstore.errors import CatalogError

STATUS_BY_KIND = {
    "not_found": 404,
    "validation_failed": 400,
    "persistence_failure": 500,
}


def error_response(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    status_code: int = 400
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "data": None,
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
        },
    )


def catalog_error_response(error: CatalogError) -> JSONResponse:
    return error_response(
        code=error.kind.upper(),
        message=error.message,
        details=error.context,
        status_code=STATUS_BY_KIND.get(error.kind, 500),
    )
