"""Domain ports for infrastructure concerns."""

from .container_port import ContainerPort

__all__ = ["ContainerPort"]
