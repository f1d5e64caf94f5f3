"""CDK stacks for the signal frontend infrastructure."""

from .frontend_stack import FrontendStack

__all__ = ["FrontendStack"]
