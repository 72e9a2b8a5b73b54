from dataclasses import dataclass, field
from typing import List, Dict, Any, Hashable
from dataclasses import asdict


@dataclass
class SerializableMixin:
    def serialize(self) -> Dict[str, Any]:
        """
        Serialize the dataclass to a nested dictionary.
        """
        return asdict(self)


@dataclass
class Constraint(SerializableMixin):
    source: Hashable
    target: Hashable

    def same_pair(self, a: Hashable, b: Hashable) -> bool:
        """True if this constraint joins ``a`` and ``b`` in either direction."""
        return {self.source, self.target} == {a, b}

    def touches(self, antenna: Hashable) -> bool:
        return antenna in (self.source, self.target)


@dataclass
class AntennaNetwork(SerializableMixin):
    """
    Editable snapshot of antennas and interference constraints.

    Editing keeps the snapshot valid for a strict allocator: antennas are
    unique and non-empty, constraints join two distinct known antennas and
    are never repeated.
    """
    antennas: List[Hashable] = field(default_factory=list)
    constraints: List[Constraint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AntennaNetwork":
        """Build a network from ``serialize()`` output, skipping invalid entries."""
        network = cls()
        for antenna in data.get("antennas", []):
            network.add_antenna(antenna)
        for item in data.get("constraints", []):
            if isinstance(item, dict):
                network.add_constraint(item["source"], item["target"])
            else:
                network.add_constraint(*item)
        return network

    def add_antenna(self, antenna: Hashable) -> bool:
        if antenna is None or antenna == "" or antenna in self.antennas:
            return False
        self.antennas.append(antenna)
        return True

    def remove_antenna(self, antenna: Hashable) -> None:
        """Remove an antenna together with every constraint that mentions it."""
        self.antennas = [a for a in self.antennas if a != antenna]
        self.constraints = [c for c in self.constraints if not c.touches(antenna)]

    def add_constraint(self, a: Hashable, b: Hashable) -> bool:
        if a == b or a not in self.antennas or b not in self.antennas:
            return False
        if any(c.same_pair(a, b) for c in self.constraints):
            return False
        self.constraints.append(Constraint(a, b))
        return True

    def remove_constraint(self, index: int) -> Constraint:
        return self.constraints.pop(index)

    def allocator(self, **options):
        """Create a ``FrequencyAllocator`` for the current snapshot."""
        from .allocator import FrequencyAllocator

        return FrequencyAllocator(list(self.antennas), list(self.constraints), **options)
