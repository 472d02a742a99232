"""Main composite construct for complete static website infrastructure."""

from collections.abc import Mapping, Sequence
from typing import Any

from aws_cdk import CfnOutput, RemovalPolicy
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from .basic_auth import BasicAuthCredentials, BasicAuthEdgeFunction
from .certificate import SiteCertificate, certificate_source
from .content import ContentDeployment
from .distribution import SiteDistribution
from .dns import SiteDns
from .storage import OriginBucket


class StaticWebsite(Construct):
  """Complete static website infrastructure.

  Creates:
  - Private S3 bucket for static content
  - CloudFront distribution with HTTPS on site_url
  - ACM certificate (reused by ARN, or issued and DNS validated)
  - Route 53 alias record in an existing hosted zone
  - Content deployment that invalidates the distribution
  - (Optional) Lambda@Edge Basic auth on viewer requests

  The distribution id is published as the DistributionID output.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_url: str,
    zone_name: str,
    sources: Sequence[s3_deploy.ISource],
    certificate_arn: str | None = None,
    basic_auth: BasicAuthCredentials | None = None,
    distribution_overrides: Mapping[str, Any] | None = None,
    distribution_paths: Sequence[str] | None = None,
    log_access: bool = False,
    insert_security_headers: bool = False,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.basic_auth = (
      BasicAuthEdgeFunction(self, "BasicAuth", credentials=basic_auth) if basic_auth else None
    )

    self.dns = SiteDns(self, "Dns", zone_name=zone_name)

    self.certificate = SiteCertificate(
      self,
      "WebsiteCertificate",
      source=certificate_source(
        site_url=site_url,
        hosted_zone=self.dns.hosted_zone,
        certificate_arn=certificate_arn,
      ),
    )

    self.bucket = OriginBucket(self, "Storage", removal_policy=removal_policy)

    self.distribution = SiteDistribution(
      self,
      "S3BackedCloudfront",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      site_url=site_url,
      edge_lambda=self.basic_auth.edge_lambda if self.basic_auth else None,
      overrides=distribution_overrides,
      log_access=log_access,
      insert_security_headers=insert_security_headers,
    )

    # Must reference the distribution so each deployment invalidates it
    self.content = ContentDeployment(
      self,
      "Content",
      sources=sources,
      bucket=self.bucket.bucket,
      distribution=self.distribution.distribution,
      distribution_paths=distribution_paths,
    )

    self.dns.create_alias_record(self.distribution.distribution, record_name=site_url)

    self.distribution_id = CfnOutput(
      self,
      "DistributionID",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
