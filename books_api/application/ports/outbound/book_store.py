from abc import ABC, abstractmethod
from typing import Any

# DynamoDB wire format: attribute name -> typed value ({"S": "..."}, {"N": "..."}, ...)
AttributeMap = dict[str, dict[str, Any]]


class BookStore(ABC):
    """
    Output port for the key-value store holding book records.

    All operations may fail with StoreError. Implementations are shared
    by concurrent requests and must not hold per-request state.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying client. Called once per process."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying client."""
        ...

    @abstractmethod
    async def get_item(self, table_name: str, key: AttributeMap) -> AttributeMap | None:
        """Fetch one item by key, or None if no item matches."""
        ...

    @abstractmethod
    async def put_item(self, table_name: str, item: AttributeMap) -> None:
        """Write one item, replacing any item with the same key."""
        ...

    @abstractmethod
    async def delete_item(self, table_name: str, key: AttributeMap) -> None:
        """Delete one item by key."""
        ...
