from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

NodeType = Literal["base", "workshop", "equipment", "component", "spare_part"]


class TreeNode(BaseModel):
    """One node of a hierarchy tree returned by the /hierarchy endpoints."""
    id: int = Field(..., description="Identifier of the entity behind the node")
    name: str = Field(..., description="Display name")
    type: NodeType = Field(..., description="Entity kind")
    data: Dict[str, Any] = Field(default_factory=dict, description="Entity read model (camelCase)")
    children: List["TreeNode"] = Field(default_factory=list)


TreeNode.model_rebuild()
