from .registry import Registry, is_abstract_type
from .values import Slot, StoredValue

__all__ = ["Registry", "Slot", "StoredValue", "is_abstract_type"]
