"""
Accessor Settings

Pydantic model describing how an accessor is built: where its preset and
custom documents live, which schema description validates them and which
document format they use.

Author: config-complete Project
License: MIT
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.documents import DocumentFormat

DEFAULT_ENVIRONMENT = "development"


class AccessorSettings(BaseModel):
    """
    Settings of a configuration accessor.

    Every location is optional: a None directory disables its source and a
    None description file disables validation. Any other value, even an
    empty string, is used as given.
    """

    model_config = ConfigDict(frozen=True)

    presets_directory: Optional[str] = Field(
        default=None,
        description="Directory of preset environment documents (wins over customs)"
    )
    description_file: Optional[str] = Field(
        default=None,
        description="Schema description listing the required properties"
    )
    customs_directory: Optional[str] = Field(
        default=None,
        description="Directory of custom environment documents"
    )
    document_format: DocumentFormat = Field(
        default=DocumentFormat.JSON,
        description="Format of the environment documents (json or yaml)"
    )
    default_environment: str = Field(
        default=DEFAULT_ENVIRONMENT,
        description="Environment resolved when none is requested"
    )

    @field_validator("document_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept format names case-insensitively, with or without a dot."""
        if isinstance(v, str):
            v = v.strip().lower().lstrip('.')
            if v == "yml":
                return DocumentFormat.YAML
        return v

    @field_validator("default_environment")
    @classmethod
    def validate_default_environment(cls, v):
        """Ensure the default environment names a document."""
        if not v.strip():
            raise ValueError("default_environment must not be empty")
        return v
