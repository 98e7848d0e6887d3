# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def has(self, interface: Union[Type, str]) -> bool:
        return interface in self.instances

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get the instance registered for a type or string key"""
        if interface in self.instances:
            return self.instances[interface]
        raise LookupError(f"No registration found for {interface}")
