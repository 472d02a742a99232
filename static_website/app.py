#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_website.config import Config
from static_website.stacks.site_stack import StaticWebsiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(url: str) -> str:
  """CloudFormation stack name for a site URL."""
  return f"StaticWebsite-{url.replace('.', '-')}"


def main(app: cdk.App | None = None) -> None:
  """Create CDK app with a stack for each configured site."""
  if app is None:
    app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Hosted zone lookups need an explicit account
  account_id = get_account_id()

  for site in config.sites:
    StaticWebsiteStack(
      app,
      stack_name_for(site.url),
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.url}",
    )

  app.synth()


if __name__ == "__main__":
  main()
