"""Route 53 DNS constructs."""

from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

ALIAS_RECORD_TYPES = ("A", "AAAA")


class DnsRecords(Construct):
  """Existing Route 53 hosted zone and the site's alias records."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    existing_hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name

    if existing_hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=existing_hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      # Resolved by the CDK CLI; fails unless exactly one zone matches
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=domain_name,
      )

  def create_cloudfront_records(
    self, distribution_domain_name: str
  ) -> list[route53.CfnRecordSet]:
    """Create apex and www A/AAAA alias records pointing to CloudFront."""
    cloudfront_zone_id = targets.CloudFrontTarget.get_hosted_zone_id(self)

    records: list[route53.CfnRecordSet] = []
    for prefix, record_name in (
      ("Apex", self.domain_name),
      ("Www", f"www.{self.domain_name}"),
    ):
      for record_type in ALIAS_RECORD_TYPES:
        records.append(
          route53.CfnRecordSet(
            self,
            f"{prefix}{record_type.capitalize()}Record",
            hosted_zone_id=self.hosted_zone.hosted_zone_id,
            name=record_name,
            type=record_type,
            alias_target=route53.CfnRecordSet.AliasTargetProperty(
              dns_name=distribution_domain_name,
              hosted_zone_id=cloudfront_zone_id,
              evaluate_target_health=True,
            ),
          )
        )
    return records
