"""Revocation endpoints: logout notifications in, membership queries out."""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from jwt_revoker.core.exceptions import BackendError, DecodeError
from jwt_revoker.dependencies import Encoding, RevocationSvc
from jwt_revoker.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/add",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={500: {"description": "Notification could not be decoded or stored"}},
)
async def add(request: Request, service: RevocationSvc, encoding: Encoding) -> Response:
    """
    Record the subject of a back-channel logout token as revoked.

    Accepts ``logout_token=<JWT>`` (form) or ``{"logout_token": "<JWT>"}`` (JSON).
    """
    body = await request.body()
    try:
        await service.revoke(body, encoding)
    except DecodeError as exc:
        logger.info("revocation.rejected", reason=exc.reason.value, detail=exc.detail)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )
    except BackendError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/check/{token_id}",
    response_model=bool,
    responses={400: {"description": "Membership backend unavailable"}},
)
async def check(token_id: str, service: RevocationSvc):
    """Return ``true`` if *token_id* is possibly revoked, ``false`` if it never was."""
    try:
        return await service.is_revoked(token_id)
    except BackendError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
