"""
Service layer: registration, resolve-and-record, and read-only queries.
"""

from .query_service import QueryService
from .registration import RegistrationService
from .resolver import Resolver

__all__ = ["QueryService", "RegistrationService", "Resolver"]
