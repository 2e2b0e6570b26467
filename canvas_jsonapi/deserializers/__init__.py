"""Resource data views handed to resource decoders."""

from .base import Includes, ResourceData, parse_iso8601

__all__ = ["Includes", "ResourceData", "parse_iso8601"]
