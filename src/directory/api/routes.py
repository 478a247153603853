"""FastAPI endpoint for supplier review notices.

Mirrors a serverless function: every response carries permissive CORS headers,
the preflight answers with an empty 200, and any failure becomes a 500 body
with ``success: false``.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from directory.api.schemas import SupplierNotificationRequest
from directory.domain import logger
from directory.supplier.notification import prepare_supplier_notification

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

router = APIRouter(prefix="/supplier-notification", tags=["suppliers"])


@router.options("")
async def supplier_notification_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("")
async def notify_supplier(request: Request) -> JSONResponse:
    try:
        payload = await request.json()
        body = SupplierNotificationRequest.model_validate(payload)
        result = prepare_supplier_notification(
            supplier_id=body.supplier_id,
            action=body.action,
            admin_email=body.admin_email,
        )
    except Exception as exc:
        logger.error("supplier_notification.failed", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "success": False},
            headers=CORS_HEADERS,
        )

    return JSONResponse(status_code=200, content=result, headers=CORS_HEADERS)
