"""
Create the books table on DynamoDB Local.

Usage (with `docker run -p 8000:8000 amazon/dynamodb-local` running):
    python -m books_api.bootstrap
"""

import asyncio
from typing import Any

import structlog
from aiobotocore.session import get_session
from botocore.exceptions import ClientError

from .config import Settings, settings
from .infrastructure.logging import configure_logging

logger = structlog.get_logger()


async def bootstrap(client: Any, table_name: str) -> bool:
    """
    Create a table keyed by a single string hash key ``id``.

    Returns:
        True if the table was created, False if it already existed
    """
    try:
        await client.create_table(
            TableName=table_name,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            ProvisionedThroughput={"ReadCapacityUnits": 1, "WriteCapacityUnits": 1},
        )
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == "ResourceInUseException":
            logger.info("Table already exists", table_name=table_name)
            return False
        raise

    logger.info("Table created", table_name=table_name)
    return True


async def bootstrap_local(app_settings: Settings) -> bool:
    """Run bootstrap against the local endpoint from settings."""
    session = get_session()
    async with session.create_client(
        "dynamodb",
        region_name=app_settings.local_region,
        endpoint_url=app_settings.local_endpoint_url,
        aws_access_key_id=app_settings.local_access_key_id,
        aws_secret_access_key=app_settings.local_secret_access_key,
    ) as client:
        return await bootstrap(client, app_settings.table_name)


def main() -> None:
    configure_logging(settings.service_name, settings.log_level)
    logger.info("Importing tables", endpoint_url=settings.local_endpoint_url)
    asyncio.run(bootstrap_local(settings))
    logger.info("Finished importing tables")


if __name__ == "__main__":
    main()
