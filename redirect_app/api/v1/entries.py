from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from redirect_app.dependencies import get_query_service, get_registration_service
from redirect_app.exceptions import EntryNotFoundError
from redirect_app.schemas import EntryCreate, EntryResponse, VisitResponse
from redirect_app.services import QueryService, RegistrationService

router = APIRouter(prefix="/entries", tags=["entries"])


@router.post("", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(
    entry_data: EntryCreate,
    registration: RegistrationService = Depends(get_registration_service)
):
    """Register a short code (always succeeds)"""
    return registration.register(entry_data.code, entry_data.url)


@router.get("", response_model=List[EntryResponse])
def list_entries(query: QueryService = Depends(get_query_service)):
    """List all entries in registration order"""
    return query.list_entries()


@router.get("/{entry_id}/visits", response_model=List[VisitResponse])
def list_entry_visits(
    entry_id: UUID,
    query: QueryService = Depends(get_query_service)
):
    """List visits recorded for one entry"""
    try:
        return query.list_visits_for_entry(entry_id)
    except EntryNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Entry not found by that ID"
        )
