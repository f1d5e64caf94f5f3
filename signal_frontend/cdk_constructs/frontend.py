"""Composite construct wiring zone, certificate, distribution and DNS."""

from aws_cdk import CfnOutput
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..config import FrontendConfig
from .certificate import ImportedCertificate
from .distribution import SpaDistribution
from .dns import FrontendCnameRecord
from .zone import HostedZoneReference


class FrontendConstruct(Construct):
  """Frontend hosting for an existing bucket, zone and certificate.

  Built in dependency order:
  - Hosted zone and certificate references (independent)
  - CloudFront distribution over the bucket, using the certificate
  - CNAME record in the zone, targeting the distribution
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: FrontendConfig,
    bucket: s3.IBucket,
  ) -> None:
    super().__init__(scope, id)

    self.zone = HostedZoneReference(
      self,
      "Zone",
      hosted_zone_id=config.hosted_zone_id,
      zone_name=config.zone_name,
    )

    self.certificate = ImportedCertificate(
      self,
      "Certificate",
      certificate_arn=config.certificate_arn,
    )

    self.distribution = SpaDistribution(
      self,
      "Distribution",
      bucket=bucket,
      certificate=self.certificate.certificate,
      domain_names=[config.site_domain],
    )

    self.record = FrontendCnameRecord(
      self,
      "Dns",
      zone=self.zone.hosted_zone,
      distribution=self.distribution.distribution,
      record_name=config.record_name,
    )

    # Outputs
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "FrontendUrl",
      value=f"https://{config.site_domain}",
      description="Public frontend URL",
    )
    CfnOutput(
      self,
      "HostedZoneId",
      value=self.zone.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
