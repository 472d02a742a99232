"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest
from aws_cdk import aws_s3_deployment as s3_deploy

# Hosted zone lookups need a concrete account and region
TEST_ENV = cdk.Environment(account="123456789012", region="us-east-1")


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=TEST_ENV)


@pytest.fixture
def sources() -> list[s3_deploy.ISource]:
  """In-memory site content, no asset directory needed."""
  return [s3_deploy.Source.data("index.html", "<html><body>hello</body></html>")]
