"""Configuration loader for multi-site management."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront

from static_website.cdk_constructs import (
  CLOUDFRONT_CERTIFICATE_REGION,
  BasicAuthCredentials,
  spa_error_responses,
)

PRICE_CLASSES = {
  "100": cloudfront.PriceClass.PRICE_CLASS_100,
  "200": cloudfront.PriceClass.PRICE_CLASS_200,
  "all": cloudfront.PriceClass.PRICE_CLASS_ALL,
}


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  url: str
  zone_name: str
  content_paths: list[str] = field(default_factory=lambda: ["site"])
  certificate_arn: str | None = None
  basic_auth: BasicAuthCredentials | None = None
  single_page_app: bool = False
  price_class: str | None = None
  log_access: bool = False
  security_headers: bool = False
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  owner: str | None = None
  region: str = "us-east-1"

  def distribution_overrides(self) -> dict[str, Any]:
    """Translate config flags into CloudFront distribution overrides."""
    overrides: dict[str, Any] = {}
    if self.single_page_app:
      overrides["error_responses"] = spa_error_responses()
    if self.price_class:
      overrides["price_class"] = PRICE_CLASSES[str(self.price_class).lower()]
    return overrides


def _parse_basic_auth(data: dict[str, Any] | None, url: str) -> BasicAuthCredentials | None:
  if not data:
    return None
  username = data.get("username")
  password = data.get("password")
  if not username or not password:
    raise ValueError(f"basic_auth for {url} needs both username and password")
  return BasicAuthCredentials(username=str(username), password=str(password))


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      for key in ("url", "zone_name"):
        if key not in merged:
          raise ValueError(f"Site entry is missing required key '{key}': {site_data}")

      # Convert removal_policy string to enum
      removal_policy_str = merged.pop("removal_policy", "retain")
      removal_policy = {
        "retain": RemovalPolicy.RETAIN,
        "destroy": RemovalPolicy.DESTROY,
        "snapshot": RemovalPolicy.SNAPSHOT,
      }.get(removal_policy_str.lower(), RemovalPolicy.RETAIN)

      content_paths = merged.get("content_paths", ["site"])
      if isinstance(content_paths, str):
        content_paths = [content_paths]

      region = merged.get("region", "us-east-1")
      if region != CLOUDFRONT_CERTIFICATE_REGION and not merged.get("certificate_arn"):
        raise ValueError(
          f"Site {merged['url']} is in {region}; CloudFront only accepts certificates "
          f"from {CLOUDFRONT_CERTIFICATE_REGION}, so set certificate_arn to one issued there"
        )

      price_class = merged.get("price_class")
      if price_class is not None and str(price_class).lower() not in PRICE_CLASSES:
        raise ValueError(
          f"Unknown price_class '{price_class}' for {merged['url']}; "
          f"expected one of {', '.join(PRICE_CLASSES)}"
        )

      sites.append(
        SiteConfig(
          url=merged["url"],
          zone_name=merged["zone_name"],
          content_paths=list(content_paths),
          certificate_arn=merged.get("certificate_arn"),
          basic_auth=_parse_basic_auth(merged.get("basic_auth"), merged["url"]),
          single_page_app=merged.get("single_page_app", False),
          price_class=str(price_class) if price_class is not None else None,
          log_access=merged.get("log_access", False),
          security_headers=merged.get("security_headers", False),
          removal_policy=removal_policy,
          owner=merged.get("owner"),
          region=region,
        )
      )

    return cls(sites=sites)
