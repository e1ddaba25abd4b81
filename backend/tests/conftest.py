"""Pytest configuration for test suite."""

import io
import sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

# Add backend/src to Python path for imports
# This file is in backend/tests/, so we need to go up one level to backend/
BACKEND_DIR = Path(__file__).parent.parent
SRC_DIR = BACKEND_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class CallLog:
    """Ordered record of every fake AWS call made during a test."""

    def __init__(self):
        self.calls = []

    def record(self, service: str, operation: str, **kwargs):
        self.calls.append((service, operation, kwargs))

    def operations(self):
        return [(service, operation) for service, operation, _ in self.calls]

    def kwargs_for(self, operation: str) -> dict:
        return next(kwargs for _, op, kwargs in self.calls if op == operation)


class FakeSTS:
    def __init__(self, log: CallLog, error: str = None):
        self.log = log
        self.error = error

    def assume_role(self, **kwargs):
        self.log.record("sts", "assume_role", **kwargs)
        if self.error:
            raise client_error(self.error, "AssumeRole")
        return {
            "Credentials": {
                "AccessKeyId": "ASIATEMP",
                "SecretAccessKey": "temp-secret",
                "SessionToken": "temp-token",
            }
        }


class FakeS3:
    def __init__(self, log: CallLog, objects: dict, credentials: dict):
        self.log = log
        self.objects = objects
        self.credentials = credentials

    def get_object(self, Bucket, Key):
        self.log.record("s3", "get_object", Bucket=Bucket, Key=Key, credentials=self.credentials)
        if (Bucket, Key) not in self.objects:
            raise client_error("NoSuchKey", "GetObject")
        payload = self.objects[(Bucket, Key)]
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return {"Body": io.BytesIO(payload)}


class FakeSSM:
    def __init__(self, log: CallLog, documents=None):
        self.log = log
        self.documents = dict(documents or {})

    def create_document(self, **kwargs):
        self.log.record("ssm", "create_document", **kwargs)
        if kwargs["Name"] in self.documents:
            raise client_error("DocumentAlreadyExists", "CreateDocument")
        self.documents[kwargs["Name"]] = kwargs["Content"]
        return {"DocumentDescription": {"Name": kwargs["Name"], "Status": "Creating"}}

    def update_document(self, **kwargs):
        self.log.record("ssm", "update_document", **kwargs)
        if kwargs["Name"] not in self.documents:
            raise client_error("InvalidDocument", "UpdateDocument")
        self.documents[kwargs["Name"]] = kwargs["Content"]
        return {"DocumentDescription": {"Name": kwargs["Name"], "Status": "Updating"}}

    def delete_document(self, **kwargs):
        self.log.record("ssm", "delete_document", **kwargs)
        if kwargs["Name"] not in self.documents:
            raise client_error("InvalidDocument", "DeleteDocument")
        del self.documents[kwargs["Name"]]
        return {}


class FakeClientFactory:
    """Stands in for boto3.client; remembers the credentials each client was built with."""

    def __init__(self, log: CallLog, objects=None, sts_error: str = None):
        self.log = log
        self.objects = dict(objects or {})
        self.sts = FakeSTS(log, error=sts_error)
        self.created = []

    def __call__(self, service_name, **kwargs):
        self.created.append((service_name, kwargs))
        if service_name == "sts":
            return self.sts
        if service_name == "s3":
            return FakeS3(self.log, self.objects, kwargs)
        raise AssertionError(f"Unexpected client: {service_name}")


@pytest.fixture
def call_log():
    return CallLog()


@pytest.fixture
def ssm(call_log):
    return FakeSSM(call_log)


@pytest.fixture
def client_factory(call_log):
    return FakeClientFactory(call_log, objects={("calendars", "biz-hours"): "BEGIN:VCALENDAR\nEND:VCALENDAR"})
