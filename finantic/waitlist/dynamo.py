# waitlist/dynamo.py

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .errors import StorageError
from .models import WaitlistEntry

logger = logging.getLogger(__name__)


def get_dynamodb_client(settings, log=None) -> Any:
    """
    Build a DynamoDB client from Settings.

    Uses the configured profile when one is set, otherwise the default
    credential chain (Lambda role, environment, default profile).
    """
    log = log or logger
    boto_config = Config(
        region_name=settings.region,
        retries={'max_attempts': settings.max_retries},
        read_timeout=settings.timeout,
        connect_timeout=settings.timeout,
    )
    session_params = {}
    if settings.profile_name:
        session_params['profile_name'] = settings.profile_name
    session = boto3.Session(**session_params)

    client_params = {'config': boto_config}
    if settings.dynamodb_endpoint:
        client_params['endpoint_url'] = settings.dynamodb_endpoint
    log.debug(f"Initializing DynamoDB client in region: {settings.region}")
    return session.client('dynamodb', **client_params)


class DynamoWaitlistStore:
    """Writes waitlist entries as typed DynamoDB items."""

    def __init__(self, table_name: str, client: Any):
        self.table_name = table_name
        self.client = client

    @staticmethod
    def to_item(entry: WaitlistEntry) -> Dict[str, Dict[str, str]]:
        return {key: {'S': value} for key, value in entry.to_dict().items()}

    def put(self, entry: WaitlistEntry) -> None:
        """
        Raises:
            StorageError: If DynamoDB rejects the write
        """
        try:
            self.client.put_item(TableName=self.table_name, Item=self.to_item(entry))
        except (ClientError, BotoCoreError) as e:
            raise StorageError(str(e)) from e
        logger.info(f"Successfully added to waitlist: {entry.email}")


_store: Optional[DynamoWaitlistStore] = None


def get_store(settings) -> DynamoWaitlistStore:
    """Lazily build the module-level store, reused across warm invocations."""
    global _store
    if _store is None:
        _store = DynamoWaitlistStore(settings.table_name, get_dynamodb_client(settings))
    return _store
