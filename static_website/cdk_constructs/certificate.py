"""ACM certificate for the site: reuse an existing ARN or issue a new one."""

from dataclasses import dataclass

from aws_cdk import Stack, Token
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

# CloudFront only reads viewer certificates from this region
CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"


@dataclass(frozen=True)
class ReusedCertificate:
  """An already issued certificate, referenced by ARN."""

  certificate_arn: str


@dataclass(frozen=True)
class ProvisionedCertificate:
  """A new certificate for domain_name, DNS validated in hosted_zone."""

  domain_name: str
  hosted_zone: route53.IHostedZone


CertificateSource = ReusedCertificate | ProvisionedCertificate


def certificate_source(
  *,
  site_url: str,
  hosted_zone: route53.IHostedZone,
  certificate_arn: str | None = None,
) -> CertificateSource:
  """Pick where the site certificate comes from.

  Args:
    site_url: Host name the certificate has to cover
    hosted_zone: Zone used for DNS validation when a certificate is issued
    certificate_arn: Existing certificate to reuse, taken verbatim

  Returns:
    ReusedCertificate when certificate_arn is set, else ProvisionedCertificate
  """
  if certificate_arn:
    return ReusedCertificate(certificate_arn=certificate_arn)
  return ProvisionedCertificate(domain_name=site_url, hosted_zone=hosted_zone)


class SiteCertificate(Construct):
  """Resolves a CertificateSource into exactly one ACM certificate handle."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    source: CertificateSource,
  ) -> None:
    super().__init__(scope, id)

    self.source = source

    if isinstance(source, ReusedCertificate):
      self.certificate: acm.ICertificate = acm.Certificate.from_certificate_arn(
        self,
        "Certificate",
        source.certificate_arn,
      )
    elif isinstance(source, ProvisionedCertificate):
      region = Stack.of(self).region
      if not Token.is_unresolved(region) and region != CLOUDFRONT_CERTIFICATE_REGION:
        raise ValueError(
          f"Cannot issue a CloudFront certificate for {source.domain_name} in {region}; "
          f"pass the ARN of a certificate issued in {CLOUDFRONT_CERTIFICATE_REGION}"
        )
      # DNS validation, no email approval needed
      self.certificate = acm.Certificate(
        self,
        "Certificate",
        domain_name=source.domain_name,
        validation=acm.CertificateValidation.from_dns(source.hosted_zone),
      )
    else:
      raise TypeError(f"Unsupported certificate source: {source!r}")

  @property
  def provisioned(self) -> bool:
    """True when this construct issues a new certificate."""
    return isinstance(self.source, ProvisionedCertificate)
