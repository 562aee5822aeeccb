#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import logging
from pathlib import Path

import aws_cdk as cdk
import boto3

from stratus_site.config import StackConfig
from stratus_site.stacks.site_stack import StaticSiteStack

logger = logging.getLogger(__name__)


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(domain: str) -> str:
  return f"StaticSite-{domain.replace('.', '-')}"


def main() -> None:
  """Create the CDK app with the static site stack."""
  logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "stack.yaml"
  config = StackConfig.from_yaml(
    Path(config_path),
    environment=app.node.try_get_context("environment"),
  )

  # Hosted zone lookups need an explicit account
  account_id = get_account_id()

  stack_name = stack_name_for(config.domain)
  logger.info(
    "Creating stack %s for %s (%s) in %s",
    stack_name,
    config.domain,
    config.environment,
    config.region,
  )
  StaticSiteStack(
    app,
    stack_name,
    config=config,
    env=cdk.Environment(
      account=account_id,
      region=config.region,
    ),
    description=f"Static website infrastructure for {config.domain}",
  )

  app.synth()


if __name__ == "__main__":
  main()
