"""
Factory for creating the process-wide store.
Simple, clean factory with singleton caching.
"""

from enum import Enum

from loguru import logger

from .entry_store import EntryStore
from .locks import ENTRIES_RANK, GuardedLock
from .store import Store
from .visit_log import VisitLog


class LockMode(Enum):
    """Available locking layouts"""
    PER_COMPONENT = "per_component"
    SINGLE = "single"


class StoreFactory:
    """
    Simple factory for creating the store.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    """
    
    _instance: Store = None  # Single cached instance
    
    @classmethod
    def create(cls, mode: LockMode = LockMode.PER_COMPONENT) -> Store:
        """
        Create or return cached store instance.
        
        Args:
            mode: PER_COMPONENT gives entries and visits their own locks;
                  SINGLE shares one coordinating lock between them.
            
        Returns:
            Singleton store instance
        """
        if cls._instance is not None:
            return cls._instance
        
        cls._instance = cls.build(mode)
        logger.info("In-memory store initialized (lock mode: {})", mode.value)
        return cls._instance

    @staticmethod
    def build(mode: LockMode) -> Store:
        """Build a fresh, uncached store"""
        if mode == LockMode.PER_COMPONENT:
            return Store(EntryStore(), VisitLog())
        elif mode == LockMode.SINGLE:
            lock = GuardedLock("store", rank=ENTRIES_RANK)
            return Store(EntryStore(lock), VisitLog(lock))
        else:
            raise ValueError(f"Unknown lock mode: {mode}")
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
