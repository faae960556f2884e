"""Pydantic models for node field schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(str, Enum):
    """Semantic types of node fields."""

    TEXT = "text"
    ENUM = "enum"
    SECRET = "secret"
    INTEGER = "integer"
    FLOAT = "float"
    READONLY = "readonly"


# Widget used by a rendering layer for each field type
INPUT_TYPES: dict[FieldType, str] = {
    FieldType.TEXT: "text",
    FieldType.ENUM: "select",
    FieldType.SECRET: "password",
    FieldType.INTEGER: "number",
    FieldType.FLOAT: "number",
    FieldType.READONLY: "display",
}


class FieldDefinition(BaseModel):
    """A single editable (or display-only) attribute of a node kind."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    default: Any = None
    label: str = ""
    placeholder: str | None = None
    options: tuple[str, ...] = ()
    minimum: int | float | None = None
    maximum: int | float | None = None
    step: int | float | None = None
    multiline: bool = False

    @model_validator(mode="after")
    def check_constraints(self) -> "FieldDefinition":
        """Ensure the variant-specific attributes are consistent."""
        if self.type == FieldType.ENUM:
            if not self.options:
                raise ValueError(f"Enum field '{self.name}' needs options")
            if self.default not in self.options:
                raise ValueError(
                    f"Default {self.default!r} of field '{self.name}' is not one of its options"
                )
        elif self.options:
            raise ValueError(f"Only enum fields take options, got them on '{self.name}'")

        if self.minimum is not None or self.maximum is not None:
            if not self.is_numeric:
                raise ValueError(f"Only numeric fields take a range, got one on '{self.name}'")
            if self.minimum is not None and self.default < self.minimum:
                raise ValueError(f"Default of field '{self.name}' is below its minimum")
            if self.maximum is not None and self.default > self.maximum:
                raise ValueError(f"Default of field '{self.name}' is above its maximum")

        return self

    @property
    def is_numeric(self) -> bool:
        """Check if the field holds a number."""
        return self.type in (FieldType.INTEGER, FieldType.FLOAT)

    @property
    def read_only(self) -> bool:
        """Check if the field is display-only."""
        return self.type == FieldType.READONLY

    @property
    def input_type(self) -> str:
        """Get the widget type a rendering layer should use."""
        return INPUT_TYPES[self.type]


class KindSpec(BaseModel):
    """Presentation metadata and field schema of a node kind."""

    model_config = ConfigDict(frozen=True)

    title: str
    label: str
    description: str | None = None
    fields: tuple[FieldDefinition, ...] = Field(default_factory=tuple)

    def field_names(self) -> list[str]:
        """Get the declared field names in order."""
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldDefinition | None:
        """Get a field definition by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None
