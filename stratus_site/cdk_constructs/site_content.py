"""Website file uploads to the site bucket."""

import logging
import shutil
import tempfile
from pathlib import Path

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from stratus_site.site_files import SiteFile

logger = logging.getLogger(__name__)

# S3 allows 50 tags per bucket; stack tags and auto-delete need the rest
MAX_OWNED_DEPLOYMENTS = 45


def stage_files(files: list[SiteFile]) -> Path:
  """Copy files into a fresh directory that holds nothing else."""
  staging_dir = Path(tempfile.mkdtemp(prefix="site-content-"))
  for site_file in files:
    shutil.copy2(site_file.source, staging_dir / site_file.key)
  return staging_dir


class SiteContent(Construct):
  """Uploads the site files as objects at the bucket root.

  Each file is copied into its own staging directory and gets its own
  deployment, so its Content-Type comes from its own extension. When the
  uploads are deleted with the stack, every deployment tags the bucket, so
  files sharing a Content-Type are uploaded together instead. Deployments
  never prune, so they leave each other's objects alone.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    files: list[SiteFile],
    retain_on_delete: bool = True,
  ) -> None:
    super().__init__(scope, id)

    if retain_on_delete:
      groups = {f"Object-{f.key}": [f] for f in files}
    else:
      groups = {}
      for site_file in files:
        group_id = f"Objects-{site_file.content_type.replace('/', '-')}"
        groups.setdefault(group_id, []).append(site_file)

      if len(groups) > MAX_OWNED_DEPLOYMENTS:
        raise ValueError(
          f"{len(groups)} content types would need {len(groups)} deployments, "
          f"but a bucket can only track {MAX_OWNED_DEPLOYMENTS}; "
          "use removal_policy retain or fewer file types"
        )

    self.objects: dict[str, s3_deploy.BucketDeployment] = {}
    self.sources: dict[str, Path] = {}
    for group_id, group in groups.items():
      staging_dir = stage_files(group)
      deployment = s3_deploy.BucketDeployment(
        self,
        group_id,
        sources=[s3_deploy.Source.asset(str(staging_dir))],
        destination_bucket=bucket,
        content_type=group[0].content_type,
        prune=False,
        retain_on_delete=retain_on_delete,
      )
      for site_file in group:
        self.objects[site_file.key] = deployment
        self.sources[site_file.key] = staging_dir
        logger.debug(
          "Declared upload %s (%s) from %s",
          site_file.key,
          site_file.content_type,
          site_file.source,
        )
