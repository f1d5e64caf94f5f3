"""Signal frontend infrastructure (AWS CDK)."""
