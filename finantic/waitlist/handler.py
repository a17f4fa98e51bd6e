# waitlist/handler.py

import json
import logging
from typing import Any, Dict, Optional

from ..config import Settings
from .dynamo import DynamoWaitlistStore, get_store
from .errors import StorageError, ValidationError
from .models import WaitlistEntry

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
}

SERVER_ERROR = {
    'error': 'Internal server error',
    'message': 'Failed to process submission',
}


def _response(status: int, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        'statusCode': status,
        'headers': dict(CORS_HEADERS),
        'body': json.dumps(body) if body is not None else '',
    }


def handle_event(event: Dict[str, Any], store: DynamoWaitlistStore) -> Dict[str, Any]:
    """API Gateway proxy event in, proxy response out."""
    if event.get('httpMethod') == 'OPTIONS':
        return _response(200)

    try:
        try:
            payload = json.loads(event.get('body') or 'null')
            entry = WaitlistEntry.from_payload(payload, require_name=False)
        except (json.JSONDecodeError, ValidationError):
            return _response(400, {'error': 'Valid email is required'})

        store.put(entry)
    except StorageError as e:
        logger.error(f"Error processing waitlist submission: {e}")
        return _response(500, SERVER_ERROR)
    except Exception as e:
        logger.error(f"Error processing waitlist submission: {e}", exc_info=True)
        return _response(500, SERVER_ERROR)

    return _response(200, {
        'success': True,
        'message': 'Successfully added to waitlist',
    })


def handler(event, context):
    """AWS Lambda entry point."""
    try:
        store = get_store(Settings.from_env())
    except Exception as e:
        logger.error(f"Error creating waitlist store: {e}", exc_info=True)
        return _response(500, SERVER_ERROR)
    return handle_event(event, store)
