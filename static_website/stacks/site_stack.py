"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from static_website.cdk_constructs import StaticWebsite
from static_website.config import SiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticWebsite(
      self,
      "Site",
      site_url=site_config.url,
      zone_name=site_config.zone_name,
      sources=[s3_deploy.Source.asset(path) for path in site_config.content_paths],
      certificate_arn=site_config.certificate_arn,
      basic_auth=site_config.basic_auth,
      distribution_overrides=site_config.distribution_overrides(),
      log_access=site_config.log_access,
      insert_security_headers=site_config.security_headers,
      removal_policy=site_config.removal_policy,
    )

    # Tag resources with owner info
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
    cdk.Tags.of(self).add("Project", "static-sites")
    cdk.Tags.of(self).add("Domain", site_config.url)
