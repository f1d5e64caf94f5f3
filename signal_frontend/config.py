"""Configuration for the signal frontend infrastructure."""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

# Environment variable names for the required inputs
ENV_HOSTED_ZONE_ID = "HOSTED_ZONE_ID"
ENV_HOSTED_ZONE_NAME = "HOSTED_ZONE_NAME"
ENV_CERTIFICATE_ARN = "HOSTED_ZONE_CERTIFICATE"

_HOSTED_ZONE_ID_RE = re.compile(r"^Z[A-Z0-9]+$")
_DNS_LABEL_RE = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")
_CERTIFICATE_ARN_RE = re.compile(
  r"^arn:aws[a-z-]*:acm:(?P<region>[a-z0-9-]+):\d{12}:certificate/[A-Za-z0-9-]+$"
)

# CloudFront only accepts certificates issued in us-east-1
CERTIFICATE_REGION = "us-east-1"

_REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


class ConfigurationError(ValueError):
  """A required configuration value is missing or malformed."""

  def __init__(self, key: str, message: str) -> None:
    super().__init__(f"{key}: {message}")
    self.key = key


def _is_dns_name(value: str) -> bool:
  labels = value.rstrip(".").lower().split(".")
  return len(labels) >= 2 and all(_DNS_LABEL_RE.match(label) for label in labels)


def _parse_removal_policy(value: str | RemovalPolicy) -> RemovalPolicy:
  if isinstance(value, RemovalPolicy):
    return value
  try:
    return _REMOVAL_POLICIES[value.lower()]
  except KeyError:
    raise ConfigurationError(
      "removal_policy", f"expected one of {sorted(_REMOVAL_POLICIES)}, got {value!r}"
    ) from None


@dataclass(frozen=True)
class FrontendConfig:
  """Inputs for the frontend composition, validated on construction."""

  hosted_zone_id: str
  hosted_zone_name: str
  certificate_arn: str
  record_name: str = "signal"
  region: str = "us-east-1"
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  owner: str | None = None

  def __post_init__(self) -> None:
    for key in ("hosted_zone_id", "hosted_zone_name", "certificate_arn"):
      value = getattr(self, key)
      if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(key, "required value is missing")

    if not _HOSTED_ZONE_ID_RE.match(self.hosted_zone_id):
      raise ConfigurationError(
        "hosted_zone_id", f"not a Route 53 hosted zone id: {self.hosted_zone_id!r}"
      )
    if not _is_dns_name(self.hosted_zone_name):
      raise ConfigurationError(
        "hosted_zone_name", f"not a DNS domain name: {self.hosted_zone_name!r}"
      )
    arn_match = _CERTIFICATE_ARN_RE.match(self.certificate_arn)
    if not arn_match:
      raise ConfigurationError(
        "certificate_arn", f"not an ACM certificate ARN: {self.certificate_arn!r}"
      )
    if arn_match.group("region") != CERTIFICATE_REGION:
      raise ConfigurationError(
        "certificate_arn",
        f"certificate must be in {CERTIFICATE_REGION}, got {arn_match.group('region')}",
      )
    if not _DNS_LABEL_RE.match(self.record_name):
      raise ConfigurationError(
        "record_name", f"not a single DNS label: {self.record_name!r}"
      )

  @property
  def zone_name(self) -> str:
    """Hosted zone name without a trailing dot."""
    return self.hosted_zone_name.rstrip(".")

  @property
  def site_domain(self) -> str:
    """Public hostname served by the distribution (e.g. signal.example.com)."""
    return f"{self.record_name}.{self.zone_name}"

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> "FrontendConfig":
    """Build configuration from environment variables.

    Required: HOSTED_ZONE_ID, HOSTED_ZONE_NAME, HOSTED_ZONE_CERTIFICATE.
    Optional: SIGNAL_RECORD_NAME, AWS_REGION, REMOVAL_POLICY, OWNER.
    """
    env = os.environ if environ is None else environ

    def required(name: str) -> str:
      value = env.get(name)
      if not value or not value.strip():
        raise ConfigurationError(name, "required environment variable is not set")
      return value.strip()

    hosted_zone_id = required(ENV_HOSTED_ZONE_ID)
    hosted_zone_name = required(ENV_HOSTED_ZONE_NAME)
    certificate_arn = required(ENV_CERTIFICATE_ARN)

    return cls(
      hosted_zone_id=hosted_zone_id,
      hosted_zone_name=hosted_zone_name,
      certificate_arn=certificate_arn,
      record_name=env.get("SIGNAL_RECORD_NAME") or "signal",
      region=env.get("AWS_REGION") or "us-east-1",
      removal_policy=_parse_removal_policy(env.get("REMOVAL_POLICY") or "retain"),
      owner=env.get("OWNER") or None,
    )

  @classmethod
  def from_yaml(cls, path: Path | str) -> "FrontendConfig":
    """Load configuration from a YAML file."""
    try:
      with open(path) as f:
        data: Any = yaml.safe_load(f) or {}
    except OSError as e:
      raise ConfigurationError("config", f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
      raise ConfigurationError("config", f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
      raise ConfigurationError("config", f"{path} must contain a mapping")

    for key in ("hosted_zone_id", "hosted_zone_name", "certificate_arn"):
      if not data.get(key):
        raise ConfigurationError(key, f"required key missing from {path}")

    return cls(
      hosted_zone_id=str(data["hosted_zone_id"]),
      hosted_zone_name=str(data["hosted_zone_name"]),
      certificate_arn=str(data["certificate_arn"]),
      record_name=data.get("record_name") or "signal",
      region=data.get("region") or "us-east-1",
      removal_policy=_parse_removal_policy(data.get("removal_policy") or "retain"),
      owner=data.get("owner") or None,
    )
