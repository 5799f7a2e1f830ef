"""Pydantic schema for the expected YAML label manifest structure."""

from pydantic import BaseModel, ConfigDict


class LabelModel(BaseModel):
    """Pydantic model for a GitHub label."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    color: str = ""


class LabelsYAMLModel(BaseModel):
    """Pydantic model for a manifest of GitHub labels."""

    labels: list[LabelModel]
