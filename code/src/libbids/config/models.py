"""Configuration models for libbids."""

from typing import List

from pydantic import BaseModel, Field


class LibBIDSConfig(BaseModel):
    """Root configuration model for libbids.

    Attributes:
        custom_dirs: Directories holding vocabulary extension documents
                     (*.json, *.yaml, *.yml), read in the given order
        follow_symlinks: Whether catalog building descends into symlinked directories
    """

    custom_dirs: List[str] = Field(
        default_factory=lambda: [".libbids/custom"],
        description="Directories with custom entity/suffix definitions",
    )
    follow_symlinks: bool = False
