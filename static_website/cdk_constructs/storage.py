"""Private S3 origin bucket for the static website."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class OriginBucket(Construct):
  """S3 bucket only reachable through CloudFront origin access control."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "WebsiteBucket",
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      encryption=s3.BucketEncryption.S3_MANAGED,
      enforce_ssl=True,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
