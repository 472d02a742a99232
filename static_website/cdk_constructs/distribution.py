"""CloudFront distribution for the static website."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from aws_cdk import Annotations, Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

T = TypeVar("T")

# Distribution fields always set from the site itself, never from overrides
OWNED_FIELDS = frozenset({"domain_names", "certificate"})


def spa_error_responses() -> list[cloudfront.ErrorResponse]:
  """Error mapping for client-side routed apps.

  S3 answers 403 for unknown keys behind origin access control; serve
  /index.html with 200 instead so the app router can take over.
  """
  return [
    cloudfront.ErrorResponse(
      http_status=403,
      response_http_status=200,
      response_page_path="/index.html",
      ttl=Duration.minutes(5),
    )
  ]


def merge_edge_lambdas(
  override_lambdas: Sequence[T] | None,
  internal_lambda: T | None = None,
) -> list[T] | None:
  """Combine caller edge lambdas with the internally built one.

  Overrides come first, the internal binding last. Falsy entries and
  repeats are dropped. Returns None instead of an empty list because
  CloudFront rejects an empty association list.
  """
  merged: list[T] = []
  for edge_lambda in [*(override_lambdas or []), internal_lambda]:
    if edge_lambda and edge_lambda not in merged:
      merged.append(edge_lambda)
  return merged or None


def behavior_kwargs(behavior: Any) -> dict[str, Any]:
  """Normalize a default_behavior override to BehaviorOptions keyword arguments.

  Accepts a mapping of keyword arguments or a cloudfront.BehaviorOptions
  struct. Only the fields set on the struct are returned.
  """
  if behavior is None:
    return {}
  if isinstance(behavior, cloudfront.BehaviorOptions):
    return dict(behavior._values)
  if isinstance(behavior, Mapping):
    return dict(behavior)
  raise TypeError(
    "default_behavior must be a cloudfront.BehaviorOptions or a mapping of its "
    f"keyword arguments, got {type(behavior).__name__}"
  )


def build_distribution_props(
  *,
  site_url: str,
  certificate: Any,
  default_behavior: Mapping[str, Any],
  internal_edge_lambda: Any = None,
  base_props: Mapping[str, Any] | None = None,
  overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
  """Merge caller overrides with the fields this site owns.

  Precedence, lowest first: base_props, overrides, then domain_names and
  certificate. default_behavior is merged one level deep, and its
  edge_lambdas key is replaced by merge_edge_lambdas() or removed when
  that returns None.

  Args:
    site_url: Host name served by the distribution
    certificate: Certificate handle for site_url
    default_behavior: Baseline BehaviorOptions keyword arguments
    internal_edge_lambda: Binding built by this site (e.g. basic auth)
    base_props: Baseline Distribution keyword arguments
    overrides: Caller Distribution keyword arguments; default_behavior may be
      a BehaviorOptions struct or a mapping

  Returns:
    Distribution keyword arguments with default_behavior as a dict
  """
  overrides = dict(overrides or {})
  behavior = {**default_behavior, **behavior_kwargs(overrides.pop("default_behavior", None))}

  edge_lambdas = merge_edge_lambdas(behavior.pop("edge_lambdas", None), internal_edge_lambda)
  if edge_lambdas is not None:
    behavior["edge_lambdas"] = edge_lambdas

  return {
    **(base_props or {}),
    **overrides,
    "domain_names": [site_url],
    "certificate": certificate,
    "default_behavior": behavior,
  }


class SiteDistribution(Construct):
  """CloudFront distribution serving a private S3 origin over HTTPS."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    site_url: str,
    edge_lambda: cloudfront.EdgeLambda | None = None,
    overrides: Mapping[str, Any] | None = None,
    log_access: bool = False,
    insert_security_headers: bool = False,
  ) -> None:
    super().__init__(scope, id)

    overrides = overrides or {}
    ignored = sorted(OWNED_FIELDS & overrides.keys())
    if ignored:
      Annotations.of(self).add_warning_v2(
        "static-website:owned-distribution-fields",
        f"Ignoring distribution overrides for {', '.join(ignored)}; "
        "these are always derived from the site URL and certificate.",
      )

    default_behavior: dict[str, Any] = {
      "origin": origins.S3BucketOrigin.with_origin_access_control(bucket),
      "viewer_protocol_policy": cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
    }
    if insert_security_headers:
      default_behavior["response_headers_policy"] = (
        cloudfront.ResponseHeadersPolicy.SECURITY_HEADERS
      )

    base_props: dict[str, Any] = {
      "comment": "Cloudfront distribution for the static website",
      "default_root_object": "index.html",
      "minimum_protocol_version": cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
      "enable_logging": log_access,
    }
    self.log_bucket: s3.Bucket | None = None
    if log_access:
      # CloudFront standard logs need ACLs on the target bucket
      self.log_bucket = s3.Bucket(
        self,
        "LogBucket",
        block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
        encryption=s3.BucketEncryption.S3_MANAGED,
        enforce_ssl=True,
        object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
      )
      base_props["log_bucket"] = self.log_bucket

    self.props = build_distribution_props(
      site_url=site_url,
      certificate=certificate,
      default_behavior=default_behavior,
      internal_edge_lambda=edge_lambda,
      base_props=base_props,
      overrides=overrides,
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      **{
        **self.props,
        "default_behavior": cloudfront.BehaviorOptions(**self.props["default_behavior"]),
      },
    )
