"""S3 bucket for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

from stratus_site.config import WebBucket


class StorageBucket(Construct):
  """Private S3 bucket configured for static website hosting.

  Public access is fully blocked; reads are granted to CloudFront through
  ``grant_origin_read``.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    web_bucket: WebBucket,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=web_bucket.name,
      website_index_document=web_bucket.index_document,
      website_error_document=web_bucket.error_document,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

  def grant_origin_read(
    self, identity: cloudfront.IOriginAccessIdentity
  ) -> iam.PolicyStatement:
    """Allow the origin access identity to read every object in the bucket."""
    statement = iam.PolicyStatement(
      sid="AllowCloudFrontOriginRead",
      actions=["s3:GetObject"],
      resources=[self.bucket.arn_for_objects("*")],
      principals=[identity.grant_principal],
    )
    self.bucket.add_to_resource_policy(statement)
    return statement
