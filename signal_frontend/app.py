#!/usr/bin/env python3
"""CDK application entry point for the signal frontend infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3
from dotenv import load_dotenv

from signal_frontend.config import ConfigurationError, FrontendConfig
from signal_frontend.stacks import FrontendStack


def get_account_id() -> str:
  """Get AWS account ID, preferring the one resolved by the CDK CLI."""
  account = os.environ.get("CDK_DEFAULT_ACCOUNT")
  if account:
    return account
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def load_config(app: cdk.App) -> FrontendConfig:
  """Load configuration from `-c config=<file>` if given, else the environment."""
  config_path = app.node.try_get_context("config")
  if config_path:
    print(f"Loading frontend configuration from {config_path}")
    return FrontendConfig.from_yaml(Path(config_path))
  print("Loading frontend configuration from environment")
  return FrontendConfig.from_env()


def main() -> None:
  """Create CDK app with the frontend stack."""
  load_dotenv()
  app = cdk.App()

  try:
    config = load_config(app)
  except ConfigurationError as e:
    print(f"✗ Invalid configuration: {e}", file=sys.stderr)
    sys.exit(1)

  FrontendStack(
    app,
    app.node.try_get_context("stack_name") or "SignalFrontend",
    config=config,
    env=cdk.Environment(
      account=get_account_id(),
      region=config.region,
    ),
    description=f"Frontend distribution for {config.site_domain}",
  )

  app.synth()


if __name__ == "__main__":
  main()
