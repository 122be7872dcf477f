"""
Component group index.

Maps Storyblok component groups to the components they contain, and keeps
the list of every known component name.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .schema import ComponentSchema


@dataclass
class GroupIndex:
    """Group membership of all components in a run.

    Sets are stored as dicts with None values to keep encounter order,
    which keeps generated unions stable between runs.
    """

    groups: Dict[str, Dict[str, None]] = field(default_factory=dict)
    component_names: Dict[str, None] = field(default_factory=dict)

    def add(self, component_name: str, group_id: str = None) -> None:
        if group_id:
            self.groups.setdefault(group_id, {})[component_name] = None
        self.component_names[component_name] = None

    def members(self, group_id: str) -> List[str]:
        """Component names in a group (empty for unknown groups)."""
        return list(self.groups.get(group_id, {}))

    def all_names(self) -> List[str]:
        return list(self.component_names)


def build_group_index(components: Iterable[ComponentSchema]) -> GroupIndex:
    """
    Build the group index in a single pass over all components.

    Duplicate component names are accepted as-is.
    """
    index = GroupIndex()
    for component in components:
        index.add(component.name, component.group_id)
    return index
