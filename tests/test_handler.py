# test_handler.py

import json
from unittest.mock import Mock

import boto3
import pytest
from botocore.exceptions import ProfileNotFound
from botocore.stub import Stubber, ANY

from finantic.waitlist import handler as handler_module
from finantic.waitlist.dynamo import DynamoWaitlistStore
from finantic.waitlist.handler import handle_event, CORS_HEADERS, SERVER_ERROR
from finantic.waitlist.models import WaitlistEntry


def post(body):
    return {'httpMethod': 'POST', 'body': json.dumps(body)}


class TestLambdaHandler:

    def setup_method(self):
        self.client = boto3.client(
            'dynamodb',
            region_name='us-east-1',
            aws_access_key_id='testing',
            aws_secret_access_key='testing',
        )
        self.stubber = Stubber(self.client)
        self.store = DynamoWaitlistStore('finantic-waitlist', self.client)

    def teardown_method(self):
        self.stubber.deactivate()

    def test_preflight(self):
        response = handle_event({'httpMethod': 'OPTIONS'}, self.store)
        assert response == {'statusCode': 200, 'headers': CORS_HEADERS, 'body': ''}

    def test_successful_put(self):
        self.stubber.add_response(
            'put_item', {},
            {'TableName': 'finantic-waitlist', 'Item': ANY},
        )
        self.stubber.activate()

        response = handle_event(post({'name': 'Ada', 'email': 'ada@example.com'}), self.store)

        assert response['statusCode'] == 200
        assert response['headers']['Access-Control-Allow-Origin'] == '*'
        assert json.loads(response['body']) == {
            'success': True,
            'message': 'Successfully added to waitlist',
        }
        self.stubber.assert_no_pending_responses()

    @pytest.mark.parametrize('body', [
        post({'name': 'Ada', 'email': 'nope'}),
        post({'name': 'Ada'}),
        {'httpMethod': 'POST', 'body': '{broken'},
        {'httpMethod': 'POST', 'body': None},
    ])
    def test_invalid_submission(self, body):
        self.stubber.activate()
        response = handle_event(body, self.store)
        assert response['statusCode'] == 400
        assert json.loads(response['body']) == {'error': 'Valid email is required'}

    def test_dynamodb_failure(self):
        self.stubber.add_client_error('put_item', service_error_code='ResourceNotFoundException')
        self.stubber.activate()
        response = handle_event(post({'email': 'ada@example.com'}), self.store)
        assert response['statusCode'] == 500
        assert json.loads(response['body']) == {
            'error': 'Internal server error',
            'message': 'Failed to process submission',
        }

    def test_item_attributes_are_typed_strings(self):
        entry = WaitlistEntry(name='', email='ada@example.com', timestamp='t', id='1-abc')
        assert DynamoWaitlistStore.to_item(entry) == {
            'id': {'S': '1-abc'},
            'name': {'S': ''},
            'email': {'S': 'ada@example.com'},
            'timestamp': {'S': 't'},
            'source': {'S': 'website'},
        }

    def test_lambda_entry_point(self, monkeypatch):
        self.stubber.add_response('put_item', {}, {'TableName': 'finantic-waitlist', 'Item': ANY})
        self.stubber.activate()
        monkeypatch.setattr(handler_module, 'get_store', lambda settings: self.store)
        response = handler_module.handler(post({'email': 'ada@example.com'}), None)
        assert response['statusCode'] == 200


class TestDynamoClient:

    def test_client_follows_settings(self):
        from finantic.config import Settings
        from finantic.waitlist.dynamo import get_dynamodb_client

        settings = Settings.from_env({
            'region': 'eu-west-1',
            'dynamodb_endpoint': 'http://localhost:8000',
        }, environ={})
        client = get_dynamodb_client(settings)
        assert client.meta.region_name == 'eu-west-1'
        assert client.meta.endpoint_url == 'http://localhost:8000'


class TestLambdaHandlerFailures:

    def setup_method(self):
        self.store = Mock()

    def test_non_string_body_is_a_server_error(self):
        response = handle_event({'httpMethod': 'POST', 'body': {'email': 'a@b'}}, self.store)
        assert response['statusCode'] == 500
        assert response['headers'] == CORS_HEADERS
        assert json.loads(response['body']) == SERVER_ERROR

    def test_unexpected_store_error_is_a_server_error(self):
        self.store.put.side_effect = RuntimeError("boom")
        response = handle_event(post({'email': 'ada@example.com'}), self.store)
        assert response['statusCode'] == 500
        assert response['headers']['Access-Control-Allow-Origin'] == '*'
        assert json.loads(response['body']) == SERVER_ERROR

    def test_store_construction_failure(self, monkeypatch):
        def broken(settings):
            raise ProfileNotFound(profile='missing')

        monkeypatch.setattr(handler_module, 'get_store', broken)
        response = handler_module.handler(post({'email': 'ada@example.com'}), None)
        assert response['statusCode'] == 500
        assert response['headers'] == CORS_HEADERS
        assert json.loads(response['body']) == SERVER_ERROR
