from abc import ABC, abstractmethod

from src.service.marketplace.domain.value_object.schema_capabilities import SchemaCapabilities


class ISchemaCapabilityProvider(ABC):
    """Process-wide view of which optional product columns exist"""

    @abstractmethod
    async def load(self) -> SchemaCapabilities:
        """Resolve once at startup"""
        pass

    @abstractmethod
    async def current(self) -> SchemaCapabilities:
        pass

    @abstractmethod
    async def refresh(self) -> SchemaCapabilities:
        """Force a re-read, e.g. after a migration ran against the live database"""
        pass
