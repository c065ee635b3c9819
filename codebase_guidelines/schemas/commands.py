"""
Command schemas for codebase-guidelines.

This module defines the models exchanged between the argument parser, the
directory copier and the command line interface:

- :class:`.HelpRequest`: the user asked for the usage text.
- :class:`.CopyCommand`: validated targets to copy and the ``force`` flag.
- :class:`.CopyResult`: resolved paths of a completed copy, used for reporting.

``ParseResult`` is the discriminated union returned by the argument parser.
Callers branch on the variant and alone decide how the process exits.
"""

from pathlib import Path
from typing import Annotated, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from codebase_guidelines.targets import Target


class HelpRequest(BaseModel):
    """ Parse result asking for the usage text. """

    kind: Literal["help"] = Field(default="help", description="Parse result discriminator")

    model_config = ConfigDict(frozen=True)


class CopyCommand(BaseModel):
    """
    Validated copy command.

    Targets are unique and keep the order in which the user first supplied them.
    """

    kind: Literal["copy"] = Field(default="copy", description="Parse result discriminator")
    targets: Tuple[Target, ...] = Field(..., min_length=1, description="Targets to copy, in order")
    force: bool = Field(default=False, description="Overwrite existing destinations")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("targets")
    def validate_unique(cls, value: Tuple[Target, ...]) -> Tuple[Target, ...]:
        """
        Validates that no target is listed twice.

        Raises:
            ValueError: If a target appears more than once.
        """
        if len(set(value)) != len(value):
            raise ValueError("targets must be unique")
        return value


class CopyResult(BaseModel):
    """ Absolute source and destination of a copied target. """

    target: Target = Field(..., description="Copied target")
    source: Path = Field(..., description="Bundled source directory")
    destination: Path = Field(..., description="Destination directory")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("source", "destination")
    def validate_absolute(cls, value: Path) -> Path:
        """
        Validates that the path is absolute.

        Raises:
            ValueError: If the path is relative.
        """
        if not value.is_absolute():
            raise ValueError(f"path '{value}' must be absolute")
        return value


ParseResult = Annotated[
    HelpRequest | CopyCommand,
    Field(
        discriminator="kind",
        description="Discriminator field to select the parse result variant"
    )
]
"""
Discriminated union of the argument parser results.
"""
