"""Route 53 zone lookup and alias record for the site."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class SiteDns(Construct):
  """Existing Route 53 hosted zone and the site's alias record.

  The zone is only looked up, never created. A missing zone is reported by
  the context provider when the app is synthesized against a real account.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.zone_name = zone_name
    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      "Zone",
      domain_name=zone_name,
    )

  def create_alias_record(
    self,
    distribution: cloudfront.IDistribution,
    record_name: str,
  ) -> route53.ARecord:
    """Create an A record aliasing record_name to the distribution."""
    self.alias_record = route53.ARecord(
      self,
      "CloudfrontRecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
    return self.alias_record
