"""Parameter and result models for atom assignment."""

from typing import Dict, List, Literal

from pydantic import BaseModel, Field


class AssignParameters(BaseModel):
    """Parameters for controlling the assignment process."""

    allowed_elements: str = "CHONSP"
    threshold: float = Field(0.5, gt=0.0)
    mode: Literal["greedy", "optimal"] = "greedy"
    use_connectivity: bool = True

    class Config:
        """Pydantic model configuration."""

        frozen = True


class AssignResult(BaseModel):
    """Result of an atom assignment between structures A and B."""

    mapping: Dict[int, int] = Field(default_factory=dict)
    assign_b_of_a: List[int] = Field(default_factory=list)
    assign_a_of_b: List[int] = Field(default_factory=list)
    num_seeded: int = 0
    num_propagated: int = 0
    size: int = 0
    assign_time: float = 0.0

    class Config:
        """Pydantic model configuration."""

        frozen = True

    def reorder_indices(self) -> List[int]:
        """Get B indices of the mapped atoms in A order.

        Returns:
            List of B indices, one per mapped A-atom, sorted by A index.
        """
        return [self.mapping[i] for i in sorted(self.mapping)]
