"""
FastAPI dependencies for dependency injection.

The store is created once per process and shared by every request; services
are thin and built per request around it.
"""

from functools import lru_cache
from ipaddress import ip_address

from fastapi import Depends, HTTPException, Request, status
from pydantic import IPvAnyAddress

from redirect_app.config import settings
from redirect_app.services import QueryService, RegistrationService, Resolver
from redirect_app.store import LockMode, Store, StoreFactory


@lru_cache()
def get_store() -> Store:
    """
    Get the store instance (singleton).
    
    @lru_cache ensures this is called only once.
    """
    return StoreFactory.create(LockMode(settings.lock_mode))


def get_client_ip(request: Request) -> IPvAnyAddress:
    """
    Visitor address taken from the underlying connection.
    
    Raises 400 when the connection carries no parseable address.
    """
    host = request.client.host if request.client else None
    try:
        return ip_address(host)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not determine client address"
        )


def get_registration_service(store: Store = Depends(get_store)) -> RegistrationService:
    return RegistrationService(store)


def get_resolver(store: Store = Depends(get_store)) -> Resolver:
    return Resolver(store)


def get_query_service(store: Store = Depends(get_store)) -> QueryService:
    return QueryService(store)
