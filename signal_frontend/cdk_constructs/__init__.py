"""CDK constructs for the signal frontend infrastructure."""

from .certificate import ImportedCertificate
from .distribution import SpaDistribution
from .dns import FrontendCnameRecord
from .frontend import FrontendConstruct
from .storage import StorageBucket
from .zone import HostedZoneReference

__all__ = [
  "FrontendCnameRecord",
  "FrontendConstruct",
  "HostedZoneReference",
  "ImportedCertificate",
  "SpaDistribution",
  "StorageBucket",
]
