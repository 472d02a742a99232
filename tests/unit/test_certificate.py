"""Tests for certificate resolution."""

import aws_cdk as cdk
import pytest
from aws_cdk import aws_route53 as route53
from aws_cdk.assertions import Template

from static_website.cdk_constructs import (
  ProvisionedCertificate,
  ReusedCertificate,
  SiteCertificate,
  certificate_source,
)

CERTIFICATE_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/cert-123"


@pytest.fixture
def hosted_zone(stack: cdk.Stack) -> route53.IHostedZone:
  """Imported hosted zone for example.com."""
  return route53.HostedZone.from_hosted_zone_attributes(
    stack,
    "Zone",
    hosted_zone_id="Z1234567890",
    zone_name="example.com",
  )


class TestCertificateSource:
  """Test selection between reusing and issuing a certificate."""

  def test_arn_reuses(self, hosted_zone: route53.IHostedZone) -> None:
    """An ARN selects the reuse path, verbatim."""
    source = certificate_source(
      site_url="www.example.com",
      hosted_zone=hosted_zone,
      certificate_arn=CERTIFICATE_ARN,
    )

    assert source == ReusedCertificate(certificate_arn=CERTIFICATE_ARN)

  def test_no_arn_provisions(self, hosted_zone: route53.IHostedZone) -> None:
    """Without an ARN a certificate is issued for the site URL."""
    source = certificate_source(site_url="www.example.com", hosted_zone=hosted_zone)

    assert isinstance(source, ProvisionedCertificate)
    assert source.domain_name == "www.example.com"
    assert source.hosted_zone is hosted_zone


class TestSiteCertificate:
  """Test the SiteCertificate construct."""

  def test_reused_declares_no_certificate(
    self, stack: cdk.Stack, hosted_zone: route53.IHostedZone
  ) -> None:
    """Reusing an ARN adds no certificate resource."""
    certificate = SiteCertificate(
      stack,
      "Certificate",
      source=ReusedCertificate(certificate_arn=CERTIFICATE_ARN),
    )

    assert certificate.provisioned is False
    assert certificate.certificate.certificate_arn == CERTIFICATE_ARN
    Template.from_stack(stack).resource_count_is("AWS::CertificateManager::Certificate", 0)

  def test_provisioned_uses_dns_validation(
    self, stack: cdk.Stack, hosted_zone: route53.IHostedZone
  ) -> None:
    """Issued certificates are DNS validated against the zone."""
    certificate = SiteCertificate(
      stack,
      "Certificate",
      source=ProvisionedCertificate(domain_name="www.example.com", hosted_zone=hosted_zone),
    )
    template = Template.from_stack(stack)

    assert certificate.provisioned is True
    template.resource_count_is("AWS::CertificateManager::Certificate", 1)
    template.has_resource_properties(
      "AWS::CertificateManager::Certificate",
      {
        "DomainName": "www.example.com",
        "ValidationMethod": "DNS",
        "DomainValidationOptions": [
          {"DomainName": "www.example.com", "HostedZoneId": "Z1234567890"},
        ],
      },
    )

  def test_unknown_source_rejected(self, stack: cdk.Stack) -> None:
    """Anything but the two sources is a TypeError."""
    with pytest.raises(TypeError):
      SiteCertificate(stack, "Certificate", source="cert-123")  # type: ignore[arg-type]

  def test_provisioned_outside_us_east_1_rejected(self) -> None:
    """CloudFront cannot use a certificate issued in another region."""
    app = cdk.App()
    stack = cdk.Stack(
      app,
      "EuStack",
      env=cdk.Environment(account="123456789012", region="eu-west-1"),
    )
    zone = route53.HostedZone.from_hosted_zone_attributes(
      stack,
      "Zone",
      hosted_zone_id="Z1234567890",
      zone_name="example.com",
    )

    with pytest.raises(ValueError, match="us-east-1"):
      SiteCertificate(
        stack,
        "Certificate",
        source=ProvisionedCertificate(domain_name="www.example.com", hosted_zone=zone),
      )
