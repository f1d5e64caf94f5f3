"""Route 53 hosted zone lookup."""

from aws_cdk import aws_route53 as route53
from constructs import Construct


class HostedZoneReference(Construct):
  """Reference to an existing hosted zone, imported by id and name.

  Nothing is created: the zone must already exist in the target account.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosted_zone_id: str,
    zone_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
      self,
      "HostedZone",
      hosted_zone_id=hosted_zone_id,
      zone_name=zone_name,
    )
