"""Pydantic v2 models shared by the scaffolder and the codegen helpers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROJECT_NAME = "my-web3-app"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ContractFramework(str, Enum):
    """Smart-contract toolchain copied into ``<project>/contracts``."""
    FOUNDRY = "foundry"
    HARDHAT = "hardhat"


class FrontendFramework(str, Enum):
    """Web UI toolchain copied into ``<project>/frontend``."""
    NEXT = "NEXT"
    VITE = "VITE"


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------

class ProjectNameError(ValueError):
    """Raised when a project name cannot be used as a directory name."""


class EmptyProjectNameError(ProjectNameError):
    def __init__(self) -> None:
        super().__init__("Project name cannot be empty.")


class InvalidProjectNameError(ProjectNameError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name {name!r}: must be a single directory name."
        )


def validate_project_name(name: str) -> str:
    """Return *name* stripped of surrounding whitespace.

    Raises:
        EmptyProjectNameError: If nothing is left after stripping.
        InvalidProjectNameError: If the name would escape the working
            directory (path separators, ``.`` or ``..``).
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise EmptyProjectNameError()
    if cleaned in (".", "..") or "/" in cleaned or "\\" in cleaned:
        raise InvalidProjectNameError(cleaned)
    return cleaned


# ---------------------------------------------------------------------------
# Scaffolder models
# ---------------------------------------------------------------------------

class ProjectRequest(BaseModel):
    """Everything needed to materialise a new project."""
    name: str = Field(..., description="Project directory name")
    contract_framework: ContractFramework
    frontend_framework: FrontendFramework

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)


class InitResult(BaseModel):
    """Outcome of a successful ``ProjectInitializer.initialize`` call."""
    project_path: Path
    contracts_path: Path
    frontend_path: Path
    files_copied: int = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Codegen models
# ---------------------------------------------------------------------------

class ContractInfo(BaseModel):
    """A ``contract <Name>`` declaration found in a Solidity source file."""
    file_name: str = Field(..., description="Source file name, e.g. 'Token.sol'")
    contract_name: str = Field(..., description="Declared contract identifier")

    @property
    def include_path(self) -> str:
        """Artifact path relative to the build-output directory."""
        return f"{self.file_name}/{self.contract_name}.json"


class FoundryPluginConfig(BaseModel):
    """Options of the code generator's foundry plugin."""
    name: Literal["foundry"] = "foundry"
    project: str = "../foundry"
    artifacts: str = "out"
    include: list[str] = Field(default_factory=list)


class ReactPluginConfig(BaseModel):
    name: Literal["react"] = "react"


PluginConfig = Annotated[
    Union[FoundryPluginConfig, ReactPluginConfig], Field(discriminator="name")
]


class CodegenConfig(BaseModel):
    """Configuration object handed to the downstream code generator."""
    out: str = Field(default="src/generated.ts", description="Generated file path")
    plugins: list[PluginConfig] = Field(default_factory=list)

    @property
    def foundry(self) -> FoundryPluginConfig | None:
        for plugin in self.plugins:
            if isinstance(plugin, FoundryPluginConfig):
                return plugin
        return None
