#!/usr/bin/env python3
"""Invalidate the CloudFront cache of a deployed static website."""

import argparse
import sys
import time

import boto3  # type: ignore[import-not-found]

OUTPUT_KEY = "DistributionID"


def get_distribution_id(stack_name: str, region: str = "us-east-1") -> str:
  """Read the distribution id from a site stack's outputs.

  Args:
    stack_name: The CDK stack name (e.g., 'StaticWebsite-www-example-com')
    region: AWS region of the stack

  Returns:
    CloudFront distribution id

  Raises:
    LookupError: If the stack has no DistributionID output
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)

  # CDK prefixes nested output ids with the construct path and a hash
  for output in response["Stacks"][0].get("Outputs", []):
    if OUTPUT_KEY in output["OutputKey"]:
      return str(output["OutputValue"])

  raise LookupError(f"Stack {stack_name} has no {OUTPUT_KEY} output")


def invalidate(distribution_id: str, paths: list[str]) -> str:
  """Create an invalidation and return its id."""
  cloudfront = boto3.client("cloudfront")
  response = cloudfront.create_invalidation(
    DistributionId=distribution_id,
    InvalidationBatch={
      "Paths": {
        "Quantity": len(paths),
        "Items": paths,
      },
      "CallerReference": str(time.time()),
    },
  )
  return str(response["Invalidation"]["Id"])


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Invalidate the CloudFront cache for a static site"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., StaticWebsite-www-example-com)",
  )
  parser.add_argument(
    "paths",
    nargs="*",
    default=["/*"],
    help="Paths to invalidate (default: /*)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )

  args = parser.parse_args()

  try:
    distribution_id = get_distribution_id(args.stack_name, args.region)
    invalidation_id = invalidate(distribution_id, args.paths)
  except Exception as e:
    print(f"Error invalidating cache: {e}", file=sys.stderr)
    sys.exit(1)

  print(f"✓ Created invalidation {invalidation_id}")
  print(f"  Distribution: {distribution_id}")
  print(f"  Paths: {' '.join(args.paths)}")


if __name__ == "__main__":
  main()
