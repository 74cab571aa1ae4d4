"""
Models for extracted components.
Provides the nested descriptor returned by the pattern extractors.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class StateEntry(BaseModel):
    """One key of a component's initial state"""
    name: str
    value: Any = None


class PropDescriptor(BaseModel):
    """One attribute accepted on a component's root element"""
    name: str


class ComponentDescriptor(BaseModel):
    """A component and, recursively, its non-markup descendants"""
    name: str = ''
    state: List[StateEntry] = Field(default_factory=list)
    props: List[PropDescriptor] = Field(default_factory=list)
    children: List['ComponentDescriptor'] = Field(default_factory=list)

    @property
    def prop_names(self) -> List[str]:
        return [prop.name for prop in self.props]

    @property
    def state_dict(self) -> Dict[str, Any]:
        """Initial state as a plain mapping, in declaration order."""
        return {entry.name: entry.value for entry in self.state}

    def find_child(self, name: str) -> Optional['ComponentDescriptor']:
        """Depth-first search for a descendant component by name."""
        for child in self.children:
            if child.name == name:
                return child
            found = child.find_child(name)
            if found is not None:
                return found
        return None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


ComponentDescriptor.model_rebuild()
