"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from stratus_site.cdk_constructs import StaticSiteConstruct
from stratus_site.config import StackConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: StackConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(self, "Site", config=config)

    # Tag resources for cost and ownership attribution
    for key, value in config.tags.items():
      cdk.Tags.of(self).add(key, value)

    # Outputs
    cdk.CfnOutput(
      self,
      "bucketName",
      value=self.site.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    cdk.CfnOutput(
      self,
      "cloudFrontDist",
      value=self.site.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
