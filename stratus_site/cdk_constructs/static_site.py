"""Main composite construct for complete static website infrastructure."""

import logging

from aws_cdk import RemovalPolicy
from constructs import Construct

from stratus_site.config import StackConfig
from stratus_site.site_files import enumerate_site_files

from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .site_content import SiteContent
from .storage import StorageBucket

logger = logging.getLogger(__name__)


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - Private S3 bucket with website hosting and all public access blocked
  - One object upload per top-level file in the site directory
  - ACM certificate for apex and www (DNS validated)
  - CloudFront origin access identity and distribution with HTTPS
  - A/AAAA alias records for apex and www in the existing hosted zone
  - Bucket policy letting only the origin access identity read objects
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: StackConfig,
  ) -> None:
    super().__init__(scope, id)

    # An unreadable site directory fails here, before any construct exists
    files = enumerate_site_files(config.site_dir)

    # DNS Hosted Zone (lookup or import)
    self.dns = DnsRecords(
      self,
      "Dns",
      domain_name=config.domain,
      existing_hosted_zone_id=config.hosted_zone_id,
    )

    # Storage - bucket name matches the www host it serves
    self.bucket = StorageBucket(
      self,
      "Bucket",
      web_bucket=config.web_bucket,
      removal_policy=config.removal_policy,
    )

    self.content = SiteContent(
      self,
      "Content",
      bucket=self.bucket.bucket,
      files=files,
      retain_on_delete=config.removal_policy != RemovalPolicy.DESTROY,
    )

    # Certificate (DNS validated)
    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=config.domain,
      hosted_zone=self.dns.hosted_zone,
    )

    # CloudFront Distribution
    self.distribution = CloudFrontDistribution(
      self,
      "Distribution",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_name=config.domain,
      comment=config.project,
      price_class=config.price_class,
      default_root_object=config.index_document,
    )

    # DNS Records pointing to CloudFront
    self.records = self.dns.create_cloudfront_records(
      distribution_domain_name=self.distribution.domain_name,
    )

    # Only CloudFront may read the bucket
    self.bucket_policy_statement = self.bucket.grant_origin_read(
      self.distribution.origin_access_identity
    )

    logger.info(
      "Declared site %s: %d objects, price class %s",
      config.domain,
      len(files),
      config.price_class,
    )
