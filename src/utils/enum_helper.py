"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, Optional, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """Parse enum member names or wire values (case-insensitive)"""

    @staticmethod
    def from_string(enum_class: Type[E], name: str, default: Optional[E] = None) -> Optional[E]:
        """
        Parse string to Enum member by name or by value, ignoring case.

        Args:
            enum_class: Enum class to parse into
            name: Member name ("BUTTONS") or wire value ("buttons")
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        wanted = name.strip().upper()
        for member in enum_class:
            if member.name.upper() == wanted:
                return member
            if isinstance(member.value, str) and member.value.upper() == wanted:
                return member

        if default is not None:
            return default
        raise ValueError(f"Invalid {enum_class.__name__} name: {name}")

    @staticmethod
    def to_enum(enum_class, value: Any):
        """Convert string or value to enum instance"""
        if isinstance(value, enum_class):
            return value
        if isinstance(value, str):
            return EnumHelper.from_string(enum_class, value)
        raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value)}")
