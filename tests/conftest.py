"""Pytest configuration and fixtures."""

import json
import os

import pytest
from unittest.mock import MagicMock

# Set environment variables before imports
os.environ["TABLE_NAME"] = "rabt-test"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ.pop("NOTIFY_FUNCTION_URL", None)
os.environ.pop("SES_FROM_EMAIL", None)
os.environ.pop("ONBOARDING_TEAM_EMAIL", None)


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_table(aws_credentials):
    """Create mocked DynamoDB table."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName="rabt-test",
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
                {"AttributeName": "GSI1PK", "AttributeType": "S"},
                {"AttributeName": "GSI1SK", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "GSI1",
                    "KeySchema": [
                        {"AttributeName": "GSI1PK", "KeyType": "HASH"},
                        {"AttributeName": "GSI1SK", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()

        yield table


@pytest.fixture
def ses_client(aws_credentials):
    """Mocked SES client with a verified sender."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        client = boto3.client("ses", region_name="us-east-1")
        client.verify_email_identity(EmailAddress="hello@rabt.test")
        yield client


@pytest.fixture
def valid_form_data():
    """A complete, valid onboarding form."""
    return {
        "company": "Acme Co.",
        "website": "",
        "contactName": "Jane Doe",
        "email": "jane@acme.com",
        "phone": "9876543210",
        "goals": "Grow Instagram reach and launch a campaign",
        "services": ["social-media"],
        "budget": "₹20,000–₹50,000",
        "timeline": "Start next month",
    }


@pytest.fixture
def mock_store():
    """Record store that stores successfully."""
    store = MagicMock()
    store.insert_onboarding_record.side_effect = lambda record: record
    return store


@pytest.fixture
def mock_notifier():
    """Notification client that always accepts."""
    notifier = MagicMock()
    notifier.notify.return_value = {
        "success": True,
        "message": "Onboarding data received successfully",
    }
    return notifier


@pytest.fixture
def api_gateway_event():
    """Create a sample API Gateway event for public endpoints."""
    def _create_event(
        method: str = "GET",
        path: str = "/",
        path_params: dict = None,
        query_params: dict = None,
        body: dict | str = None,
    ):
        return {
            "httpMethod": method,
            "path": path,
            "pathParameters": path_params or {},
            "queryStringParameters": query_params or {},
            "body": body if isinstance(body, str) else (
                json.dumps(body) if body is not None else None
            ),
            "headers": {
                "Content-Type": "application/json",
            },
            "requestContext": {
                "identity": {"sourceIp": "1.2.3.4"},
            },
        }

    return _create_event


class LambdaContext:
    """Mock Lambda context."""

    def __init__(self):
        self.function_name = "test-function"
        self.memory_limit_in_mb = 128
        self.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789:function:test"
        self.aws_request_id = "test-request-id"

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context."""
    return LambdaContext()
