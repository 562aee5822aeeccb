"""Configuration loader for the static site stack."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from aws_cdk import RemovalPolicy

DEFAULT_PRICE_CLASS = "PriceClass_100"

PRICE_CLASSES = {
  "dev": "PriceClass_100",
  "prod": "PriceClass_All",
}

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


def resolve_price_class(environment: str) -> str:
  """Map an environment name onto a CloudFront price class.

  Unknown environments fall back to the cheapest tier instead of failing.
  """
  return PRICE_CLASSES.get(environment, DEFAULT_PRICE_CLASS)


@dataclass(frozen=True)
class WebBucket:
  """Website hosting settings for the site bucket."""

  name: str
  index_document: str = "index.html"
  error_document: str = "error.html"


@dataclass(frozen=True)
class StackConfig:
  """Configuration for the static site stack."""

  project: str = "stratusLabs"
  environment: str = "dev"
  site_dir: Path = field(default_factory=lambda: Path("./www/_site"))
  domain: str = "stratuslabs.net"
  region: str = "us-east-1"
  hosted_zone_id: str | None = None
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  index_document: str = "index.html"
  error_document: str = "error.html"

  def __post_init__(self) -> None:
    if not self.project:
      raise ValueError("project must not be empty")
    if not self.domain:
      raise ValueError("domain must not be empty")

  @property
  def www_domain(self) -> str:
    return f"www.{self.domain}"

  @property
  def price_class(self) -> str:
    return resolve_price_class(self.environment)

  @property
  def tags(self) -> dict[str, str]:
    """Cost and ownership tags attached to every taggable resource."""
    return {
      "project": self.project,
      "environment": self.environment,
    }

  @property
  def web_bucket(self) -> WebBucket:
    return WebBucket(
      name=self.www_domain,
      index_document=self.index_document,
      error_document=self.error_document,
    )

  @classmethod
  def from_yaml(
    cls,
    path: Path | str = "stack.yaml",
    environment: str | None = None,
  ) -> "StackConfig":
    """Load configuration from a YAML file.

    A relative ``site_dir`` is resolved against the file's directory. When
    given, ``environment`` overrides the value in the file.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    # Convert removal_policy string to enum
    removal_policy_str = str(data.get("removal_policy") or "retain")
    removal_policy = REMOVAL_POLICIES.get(
      removal_policy_str.lower(), RemovalPolicy.RETAIN
    )

    site_dir = Path(data.get("site_dir") or "./www/_site")
    if not site_dir.is_absolute():
      site_dir = path.parent / site_dir

    return cls(
      project=str(data.get("project") or "stratusLabs"),
      environment=str(environment or data.get("environment") or "dev"),
      site_dir=site_dir,
      domain=str(data.get("domain") or "stratuslabs.net"),
      region=data.get("region") or "us-east-1",
      hosted_zone_id=data.get("hosted_zone_id") or None,
      removal_policy=removal_policy,
      index_document=data.get("index_document") or "index.html",
      error_document=data.get("error_document") or "error.html",
    )
