"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest
from aws_cdk import aws_s3 as s3

from signal_frontend.config import FrontendConfig

_CERTIFICATE_ARN = (
  "arn:aws:acm:us-east-1:123456789012:certificate/0b1c2d3e-4f50-6172-8394-a5b6c7d8e9f0"
)


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def config() -> FrontendConfig:
  """Create a valid frontend configuration."""
  return FrontendConfig(
    hosted_zone_id="Z123",
    hosted_zone_name="example.com",
    certificate_arn=_CERTIFICATE_ARN,
  )


@pytest.fixture
def bucket(stack: cdk.Stack) -> s3.Bucket:
  """Create an origin bucket in the test stack."""
  return s3.Bucket(stack, "OriginBucket")


@pytest.fixture
def certificate_arn() -> str:
  """ARN of an imported us-east-1 certificate."""
  return _CERTIFICATE_ARN
