"""CloudFront distribution for the single-page frontend."""

from collections.abc import Sequence

from aws_cdk import Duration, Stack
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

SPA_ROOT_OBJECT = "index.html"
SPA_FALLBACK_PATH = f"/{SPA_ROOT_OBJECT}"

# Assets are content-hashed by the frontend build, so they never change in place
LONG_TERM_TTL = Duration.days(365)
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"

MINIMUM_PROTOCOL_VERSION = cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021

# (header, value, override)
RESPONSE_HEADERS: tuple[tuple[str, str, bool], ...] = (
  ("Cache-Control", IMMUTABLE_CACHE_CONTROL, True),
)


def long_term_cache_policy(scope: Construct, id: str, *, name: str) -> cloudfront.CachePolicy:
  """Cache policy keyed on path only, holding objects for a full year."""
  return cloudfront.CachePolicy(
    scope,
    id,
    cache_policy_name=name,
    default_ttl=LONG_TERM_TTL,
    min_ttl=LONG_TERM_TTL,
    max_ttl=LONG_TERM_TTL,
    enable_accept_encoding_gzip=True,
    enable_accept_encoding_brotli=True,
    cookie_behavior=cloudfront.CacheCookieBehavior.none(),
    header_behavior=cloudfront.CacheHeaderBehavior.none(),
    query_string_behavior=cloudfront.CacheQueryStringBehavior.none(),
  )


def immutable_response_headers_policy(
  scope: Construct,
  id: str,
  *,
  name: str,
  headers: Sequence[tuple[str, str, bool]] = RESPONSE_HEADERS,
) -> cloudfront.ResponseHeadersPolicy:
  """Response headers policy adding the given custom headers.

  Raises ValueError if a header name appears twice (names compare
  case-insensitively, as in HTTP).
  """
  seen: set[str] = set()
  custom_headers = []
  for header, value, override in headers:
    if header.lower() in seen:
      raise ValueError(f"Duplicate response header in policy {name}: {header}")
    seen.add(header.lower())
    custom_headers.append(
      cloudfront.ResponseCustomHeader(header=header, value=value, override=override)
    )

  return cloudfront.ResponseHeadersPolicy(
    scope,
    id,
    response_headers_policy_name=name,
    custom_headers_behavior=cloudfront.ResponseCustomHeadersBehavior(
      custom_headers=custom_headers,
    ),
  )


def spa_error_responses() -> list[cloudfront.ErrorResponse]:
  """Serve the root document for unknown paths so client-side routing works.

  TTL is zero: once real content exists at a path the fallback must not
  stay cached.
  """
  return [
    cloudfront.ErrorResponse(
      http_status=404,
      response_http_status=200,
      response_page_path=SPA_FALLBACK_PATH,
      ttl=Duration.seconds(0),
    ),
  ]


class SpaDistribution(Construct):
  """CloudFront distribution reading a private S3 bucket through an OAI.

  Creates:
  - Origin access identity, granted read access to the bucket
  - Long-term cache policy (365 days, no cookies/headers/query strings)
  - Response headers policy forcing an immutable Cache-Control
  - Distribution with the SPA 404 fallback and a pinned TLS floor
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_names: Sequence[str],
  ) -> None:
    super().__init__(scope, id)

    stack_name = Stack.of(self).stack_name

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OAI",
      comment=f"Read access to the {stack_name} frontend bucket",
    )
    bucket.grant_read(self.origin_access_identity)

    self.cache_policy = long_term_cache_policy(
      self,
      "LongTermCachePolicy",
      name=f"{stack_name}LongTermCachePolicy",
    )

    self.response_headers_policy = immutable_response_headers_policy(
      self,
      "ResponseHeadersPolicy",
      name=f"{stack_name}ResponseHeadersPolicy",
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=self.origin_access_identity,
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        cache_policy=self.cache_policy,
        response_headers_policy=self.response_headers_policy,
      ),
      default_root_object=SPA_ROOT_OBJECT,
      domain_names=list(domain_names),
      certificate=certificate,
      minimum_protocol_version=MINIMUM_PROTOCOL_VERSION,
      error_responses=spa_error_responses(),
    )
