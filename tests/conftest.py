"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from stratus_site.config import StackConfig

TEST_ENV = cdk.Environment(account="123456789012", region="us-east-1")


@pytest.fixture
def env() -> cdk.Environment:
  """Account and region concrete enough for hosted zone lookups."""
  return TEST_ENV


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=TEST_ENV)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
  """Create a site directory with an index and an error page."""
  site = tmp_path / "_site"
  site.mkdir()
  (site / "index.html").write_text("<h1>Home</h1>")
  (site / "error.html").write_text("<h1>Not found</h1>")
  return site


@pytest.fixture
def config(site_dir: Path) -> StackConfig:
  """Create a stack configuration for example.com with an imported zone."""
  return StackConfig(
    project="exampleSite",
    environment="dev",
    site_dir=site_dir,
    domain="example.com",
    hosted_zone_id="Z0123456789EXAMPLE",
  )
