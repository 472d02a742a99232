"""CDK constructs for static website infrastructure."""

from .basic_auth import BasicAuthCredentials, BasicAuthEdgeFunction
from .certificate import (
  CLOUDFRONT_CERTIFICATE_REGION,
  CertificateSource,
  ProvisionedCertificate,
  ReusedCertificate,
  SiteCertificate,
  certificate_source,
)
from .content import ContentDeployment
from .distribution import (
  SiteDistribution,
  build_distribution_props,
  merge_edge_lambdas,
  spa_error_responses,
)
from .dns import SiteDns
from .static_site import StaticWebsite
from .storage import OriginBucket

__all__ = [
  "CLOUDFRONT_CERTIFICATE_REGION",
  "BasicAuthCredentials",
  "BasicAuthEdgeFunction",
  "CertificateSource",
  "ContentDeployment",
  "OriginBucket",
  "ProvisionedCertificate",
  "ReusedCertificate",
  "SiteCertificate",
  "SiteDistribution",
  "SiteDns",
  "StaticWebsite",
  "build_distribution_props",
  "certificate_source",
  "merge_edge_lambdas",
  "spa_error_responses",
]
