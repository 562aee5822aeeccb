"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate for the apex and www names, validated through Route 53.

  Each subject name is paired with its hosted zone by name, and
  CloudFormation writes one validation CNAME per pairing.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
  ) -> None:
    super().__init__(scope, id)

    self.subject_names = [domain_name, f"www.{domain_name}"]

    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      subject_alternative_names=self.subject_names[1:],
      validation=acm.CertificateValidation.from_dns_multi_zone(
        {name: hosted_zone for name in self.subject_names}
      ),
    )
