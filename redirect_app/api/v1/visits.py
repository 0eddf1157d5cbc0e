from typing import List

from fastapi import APIRouter, Depends

from redirect_app.dependencies import get_query_service
from redirect_app.schemas import VisitResponse
from redirect_app.services import QueryService

router = APIRouter(prefix="/visits", tags=["visits"])


@router.get("", response_model=List[VisitResponse])
def list_visits(query: QueryService = Depends(get_query_service)):
    """List every recorded visit in the order they happened"""
    return query.list_all_visits()
