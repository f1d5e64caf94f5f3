"""Existing ACM certificate lookup."""

from aws_cdk import aws_certificatemanager as acm
from constructs import Construct


class ImportedCertificate(Construct):
  """ACM certificate imported by ARN.

  Whether it covers the distribution's domain names is checked by CloudFront
  when the stack is deployed, not here.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    certificate_arn: str,
  ) -> None:
    super().__init__(scope, id)

    self.certificate = acm.Certificate.from_certificate_arn(
      self,
      "Certificate",
      certificate_arn,
    )
