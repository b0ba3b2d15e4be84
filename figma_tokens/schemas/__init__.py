"""Pydantic schemas for the Figma local variables API."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# ============= Variable Schemas =============

class VariableMode(BaseModel):
    """A named mode of a variable collection (e.g. "Light Mode")."""

    mode_id: str = Field(..., alias="modeId")
    name: str

    class Config:
        populate_by_name = True


class VariableAlias(BaseModel):
    """A value that points at another variable instead of holding a literal."""

    type: str = "VARIABLE_ALIAS"
    id: str

    @classmethod
    def parse_value(cls, value: Any) -> Optional["VariableAlias"]:
        """Return the alias if ``value`` is one, otherwise None."""
        if isinstance(value, dict) and value.get("type") == "VARIABLE_ALIAS":
            return cls.model_validate(value)
        return None


class Variable(BaseModel):
    """Schema for a single Figma variable."""

    id: str
    name: str
    key: str = ""
    variable_collection_id: str = Field(..., alias="variableCollectionId")
    resolved_type: str = Field(..., alias="resolvedType")
    values_by_mode: Dict[str, Any] = Field(default_factory=dict, alias="valuesByMode")
    remote: bool = False
    description: str = ""
    hidden_from_publishing: bool = Field(False, alias="hiddenFromPublishing")
    deleted_but_referenced: bool = Field(False, alias="deletedButReferenced")

    class Config:
        populate_by_name = True


class VariableCollection(BaseModel):
    """Schema for a Figma variable collection."""

    id: str
    name: str
    key: str = ""
    modes: List[VariableMode] = []
    default_mode_id: Optional[str] = Field(None, alias="defaultModeId")
    remote: bool = False
    hidden_from_publishing: bool = Field(False, alias="hiddenFromPublishing")
    variable_ids: List[str] = Field(default_factory=list, alias="variableIds")

    class Config:
        populate_by_name = True


class LocalVariablesMeta(BaseModel):
    """The ``meta`` block of a local variables response."""

    variables: Dict[str, Variable] = {}
    variable_collections: Dict[str, VariableCollection] = Field(
        default_factory=dict, alias="variableCollections"
    )

    class Config:
        populate_by_name = True


class LocalVariablesResponse(BaseModel):
    """Schema for ``GET /v1/files/:key/variables/local``."""

    status: int = 200
    error: bool = False
    meta: LocalVariablesMeta = Field(default_factory=LocalVariablesMeta)
