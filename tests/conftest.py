"""Shared fixtures for the echo handler and CDK stack tests."""

import json
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# The Lambda code and the CDK app are plain directories, not installed packages
sys.path.insert(0, str(ROOT / "infra"))
sys.path.insert(0, str(ROOT / "backend" / "handler"))

EVENTS_DIR = ROOT / "events"


@dataclass
class FakeLambdaContext:
    function_name: str = "python-lambda-cookbook-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:python-lambda-cookbook-test"
    aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def load_event():
    """Load one of the sample API Gateway proxy events by file stem."""

    def _load(name: str) -> dict:
        return json.loads((EVENTS_DIR / f"{name}.json").read_text())

    return _load


@pytest.fixture
def make_event():
    """Build a minimal REST proxy event."""

    def _make(method="GET", path="/", headers=None, query=None, body=None) -> dict:
        return {
            "httpMethod": method,
            "path": path,
            "headers": headers,
            "queryStringParameters": query,
            "body": body,
            "isBase64Encoded": False,
        }

    return _make
