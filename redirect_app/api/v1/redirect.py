from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from pydantic import IPvAnyAddress

from redirect_app.api.query_params import merge_query_params
from redirect_app.config import settings
from redirect_app.dependencies import get_client_ip, get_resolver
from redirect_app.exceptions import EntryNotFoundError
from redirect_app.services import Resolver

router = APIRouter(tags=["redirect"])


@router.get("/{code}")
def redirect_to_destination(
    code: str,
    request: Request,
    ip: IPvAnyAddress = Depends(get_client_ip),
    resolver: Resolver = Depends(get_resolver)
):
    """
    Redirect to the destination registered for a code.
    
    The visit is recorded before the response is sent. The handler is sync,
    so it runs on a worker thread and may block on the store locks.
    """
    try:
        url = resolver.resolve(code, ip)
    except EntryNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not found"
        )

    if settings.forward_query_params:
        url = merge_query_params(url, request.query_params.multi_items())

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
