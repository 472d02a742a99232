"""Site content upload with CloudFront cache invalidation."""

from collections.abc import Sequence

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class ContentDeployment(Construct):
  """Deploys content sources to the origin bucket.

  Every deployment invalidates the given distribution, all paths unless
  distribution_paths narrows it down.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    sources: Sequence[s3_deploy.ISource],
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
    distribution_paths: Sequence[str] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "DeployWebsite",
      sources=list(sources),
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=list(distribution_paths) if distribution_paths else None,
    )
