import structlog

from ...application.ports.outbound import BookStore
from ...config import Settings
from .dynamodb_book_store import DynamoDbBookStore
from .retrying_book_store import RetryingBookStore, RetryPolicy

logger = structlog.get_logger()


def create_book_store(settings: Settings) -> BookStore:
    """
    Select the store endpoint from the mode flag and wrap it with retries.

    ``env == "live"`` selects the production region; any other value,
    including unset, selects DynamoDB Local.
    """
    if settings.is_live:
        logger.info("Using live DynamoDB endpoint", region=settings.live_region)
        store = DynamoDbBookStore(
            region=settings.live_region,
            connect_timeout=settings.store_connect_timeout_seconds,
            read_timeout=settings.store_read_timeout_seconds,
        )
    else:
        logger.info("Using local DynamoDB endpoint", endpoint_url=settings.local_endpoint_url)
        store = DynamoDbBookStore(
            region=settings.local_region,
            endpoint_url=settings.local_endpoint_url,
            aws_access_key_id=settings.local_access_key_id,
            aws_secret_access_key=settings.local_secret_access_key,
            connect_timeout=settings.store_connect_timeout_seconds,
            read_timeout=settings.store_read_timeout_seconds,
        )

    policy = RetryPolicy(
        max_retries=settings.store_max_retries,
        base_delay_ms=settings.store_base_delay_ms,
        max_delay_ms=settings.store_max_delay_ms,
    )
    return RetryingBookStore(store, policy)
