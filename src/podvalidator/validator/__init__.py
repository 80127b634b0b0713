"""Schema rules for Pod manifests."""

from podvalidator.validator.pod import PodValidator

__all__ = ["PodValidator"]
