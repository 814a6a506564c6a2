"""Starter Kit configuration.

Typed configuration for the scaffolder. The template root and the working
directory are explicit fields rather than ambient process state, so the
initializer can be pointed at any location (tests, alternate template
packs) without touching ``os.chdir``.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from starter_kit.models import ContractFramework, FrontendFramework

DEFAULT_TEMPLATES_ROOT = Path(__file__).parent / "templates"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global Starter Kit configuration.

    Created once by the CLI entry point (or by a test) and handed to
    ``ProjectInitializer``.
    """

    templates_root: Path = Field(
        default=DEFAULT_TEMPLATES_ROOT,
        description="Root holding contracts/<framework> and frontend/<framework> trees",
    )
    working_directory: Path = Field(
        default_factory=Path.cwd,
        description="Directory the new project folder is created in",
    )
    atomic: bool = Field(
        default=False,
        description="Stage the copy in a temporary directory and rename on success",
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def contracts_root(self) -> Path:
        return self.templates_root / "contracts"

    @property
    def frontend_root(self) -> Path:
        return self.templates_root / "frontend"

    def contract_template(self, framework: ContractFramework | str) -> Path:
        """Template tree copied to ``<project>/contracts``."""
        return self.contracts_root / ContractFramework(framework).value

    def frontend_template(self, framework: FrontendFramework | str) -> Path:
        """Template tree copied to ``<project>/frontend``."""
        return self.frontend_root / FrontendFramework(framework).value

    def project_path(self, name: str) -> Path:
        return self.working_directory / name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STARTER_KIT_TEMPLATES, STARTER_KIT_WORKDIR, STARTER_KIT_ATOMIC.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("STARTER_KIT_TEMPLATES"):
            kwargs["templates_root"] = Path(os.environ["STARTER_KIT_TEMPLATES"])
        if os.environ.get("STARTER_KIT_WORKDIR"):
            kwargs["working_directory"] = Path(os.environ["STARTER_KIT_WORKDIR"])
        if os.environ.get("STARTER_KIT_ATOMIC"):
            kwargs["atomic"] = os.environ["STARTER_KIT_ATOMIC"].strip().lower() in _TRUTHY
        return cls(**kwargs)
