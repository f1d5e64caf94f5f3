"""CDK stack for the signal frontend."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from signal_frontend.cdk_constructs import FrontendConstruct, StorageBucket
from signal_frontend.config import FrontendConfig


class FrontendStack(cdk.Stack):
  """Stack holding the origin bucket and the frontend distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: FrontendConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.storage = StorageBucket(
      self,
      "Storage",
      removal_policy=config.removal_policy,
    )

    self.frontend = FrontendConstruct(
      self,
      "Frontend",
      config=config,
      bucket=self.storage.bucket,
    )

    cdk.CfnOutput(
      self,
      "BucketName",
      value=self.storage.bucket.bucket_name,
      description="S3 bucket for frontend assets",
    )

    cdk.Tags.of(self).add("Project", "signal-frontend")
    cdk.Tags.of(self).add("Domain", config.site_domain)
    if config.owner:
      cdk.Tags.of(self).add("Owner", config.owner)
