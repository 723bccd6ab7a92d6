from contextlib import AsyncExitStack
from typing import Any

import structlog
from aiobotocore.config import AioConfig
from aiobotocore.session import get_session
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from ...application.ports.outbound import AttributeMap, BookStore
from ...domain.exceptions import StoreError

logger = structlog.get_logger()

# Client error codes that indicate a transient condition
RETRYABLE_ERROR_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
        "RequestLimitExceeded",
        "InternalServerError",
        "ServiceUnavailable",
        "LimitExceededException",
    }
)

_TRANSIENT_BOTOCORE_ERRORS = (
    EndpointConnectionError,
    ConnectionClosedError,
    ConnectTimeoutError,
    ReadTimeoutError,
)


class DynamoDbBookStore(BookStore):
    """
    DynamoDB adapter implementing the BookStore port.

    Holds one aiobotocore client for the process lifetime. Botocore's own
    retries are disabled; retry policy belongs to RetryingBookStore.
    """

    def __init__(
        self,
        region: str,
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        connect_timeout: int = 5,
        read_timeout: int = 10,
    ) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        self._aws_access_key_id = aws_access_key_id
        self._aws_secret_access_key = aws_secret_access_key
        self._config = AioConfig(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={"mode": "standard", "total_max_attempts": 1},
        )
        self._session = get_session()
        self._exit_stack: AsyncExitStack | None = None
        self._client: Any = None

    @property
    def region(self) -> str:
        return self._region

    @property
    def endpoint_url(self) -> str | None:
        return self._endpoint_url

    async def connect(self) -> None:
        if self._client is not None:
            return

        client_kwargs: dict[str, Any] = {
            "region_name": self._region,
            "config": self._config,
        }
        if self._endpoint_url:
            client_kwargs["endpoint_url"] = self._endpoint_url
        if self._aws_access_key_id and self._aws_secret_access_key:
            client_kwargs["aws_access_key_id"] = self._aws_access_key_id
            client_kwargs["aws_secret_access_key"] = self._aws_secret_access_key

        exit_stack = AsyncExitStack()
        self._client = await exit_stack.enter_async_context(
            self._session.create_client("dynamodb", **client_kwargs)
        )
        self._exit_stack = exit_stack
        logger.info(
            "DynamoDB client created",
            region=self._region,
            endpoint_url=self._endpoint_url,
        )

    async def close(self) -> None:
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
        self._exit_stack = None
        self._client = None

    async def get_item(self, table_name: str, key: AttributeMap) -> AttributeMap | None:
        client = self._require_client()
        try:
            response = await client.get_item(TableName=table_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise _to_store_error("GetItem", e) from e
        return response.get("Item")

    async def put_item(self, table_name: str, item: AttributeMap) -> None:
        client = self._require_client()
        try:
            await client.put_item(TableName=table_name, Item=item)
        except (ClientError, BotoCoreError) as e:
            raise _to_store_error("PutItem", e) from e

    async def delete_item(self, table_name: str, key: AttributeMap) -> None:
        client = self._require_client()
        try:
            await client.delete_item(TableName=table_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise _to_store_error("DeleteItem", e) from e

    def _require_client(self) -> Any:
        if self._client is None:
            raise StoreError("DynamoDB client is not connected", code="NotConnected")
        return self._client


def _to_store_error(operation: str, error: Exception) -> StoreError:
    """Translate a botocore failure into a StoreError with a retryable flag."""
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code", "")
        return StoreError(
            f"{operation} failed: {code}",
            code=code,
            retryable=code in RETRYABLE_ERROR_CODES,
        )

    return StoreError(
        f"{operation} failed: {type(error).__name__}",
        code=type(error).__name__,
        retryable=isinstance(error, _TRANSIENT_BOTOCORE_ERRORS),
    )
