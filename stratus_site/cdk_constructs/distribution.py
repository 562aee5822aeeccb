"""CloudFront distribution for static website."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct

from stratus_site.config import DEFAULT_PRICE_CLASS

CACHED_METHODS = ["GET", "HEAD"]


class CloudFrontDistribution(Construct):
  """CloudFront distribution reading a private bucket through an origin access identity."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
    comment: str,
    price_class: str = DEFAULT_PRICE_CLASS,
    default_root_object: str = "index.html",
  ) -> None:
    super().__init__(scope, id)

    # Capability CloudFront presents to the bucket
    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OriginAccessIdentity",
      comment=comment,
    )

    self.origin_id = f"S3-www.{domain_name}"
    origin_path = (
      "origin-access-identity/cloudfront/"
      f"{self.origin_access_identity.origin_access_identity_id}"
    )

    self.distribution = cloudfront.CfnDistribution(
      self,
      "Distribution",
      distribution_config=cloudfront.CfnDistribution.DistributionConfigProperty(
        enabled=True,
        http_version="http2and3",
        ipv6_enabled=True,
        default_root_object=default_root_object,
        aliases=[domain_name, f"www.{domain_name}"],
        origins=[
          cloudfront.CfnDistribution.OriginProperty(
            id=self.origin_id,
            domain_name=bucket.bucket_regional_domain_name,
            s3_origin_config=cloudfront.CfnDistribution.S3OriginConfigProperty(
              origin_access_identity=origin_path,
            ),
          )
        ],
        default_cache_behavior=cloudfront.CfnDistribution.DefaultCacheBehaviorProperty(
          target_origin_id=self.origin_id,
          viewer_protocol_policy="redirect-to-https",
          allowed_methods=CACHED_METHODS,
          cached_methods=CACHED_METHODS,
          forwarded_values=cloudfront.CfnDistribution.ForwardedValuesProperty(
            query_string=False,
            cookies=cloudfront.CfnDistribution.CookiesProperty(forward="none"),
          ),
          min_ttl=0,
          default_ttl=3600,
          max_ttl=86400,
        ),
        price_class=price_class,
        restrictions=cloudfront.CfnDistribution.RestrictionsProperty(
          geo_restriction=cloudfront.CfnDistribution.GeoRestrictionProperty(
            restriction_type="none",
          ),
        ),
        viewer_certificate=cloudfront.CfnDistribution.ViewerCertificateProperty(
          acm_certificate_arn=certificate.certificate_arn,
          ssl_support_method="sni-only",
          minimum_protocol_version="TLSv1.2_2021",
        ),
      ),
    )

  @property
  def distribution_id(self) -> str:
    return self.distribution.ref

  @property
  def domain_name(self) -> str:
    return self.distribution.attr_domain_name
