"""Domain value objects."""

from src.domain.value_objects.caller import Caller

__all__ = ["Caller"]
