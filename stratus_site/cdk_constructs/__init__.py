"""CDK constructs for static website infrastructure."""

from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .site_content import SiteContent
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "SiteContent",
  "StaticSiteConstruct",
  "StorageBucket",
]
