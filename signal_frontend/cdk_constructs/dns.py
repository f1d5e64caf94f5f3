"""Route 53 record for the frontend hostname."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from constructs import Construct


class FrontendCnameRecord(Construct):
  """CNAME from the frontend subdomain to the distribution's domain name.

  The target is the distribution's own domain name attribute, so the record
  follows the distribution if CloudFormation replaces it.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone: route53.IHostedZone,
    distribution: cloudfront.IDistribution,
    record_name: str = "signal",
  ) -> None:
    super().__init__(scope, id)

    self.record = route53.CnameRecord(
      self,
      "CnameRecord",
      zone=zone,
      record_name=record_name,
      domain_name=distribution.distribution_domain_name,
    )
