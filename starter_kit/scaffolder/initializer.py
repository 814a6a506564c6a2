"""Project materialisation.

Creates ``<working_directory>/<name>`` and fills it with two template trees:
``contracts/<framework>`` becomes ``<project>/contracts`` and
``frontend/<framework>`` becomes ``<project>/frontend``.
"""

from __future__ import annotations

import asyncio
import shutil
import uuid
from pathlib import Path

from starter_kit.config import Config
from starter_kit.models import (
    ContractFramework,
    FrontendFramework,
    InitResult,
    ProjectRequest,
)
from starter_kit.utils import copy_tree, count_files

CONTRACTS_DIR = "contracts"
FRONTEND_DIR = "frontend"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InitializerError(Exception):
    """Base class for failures while creating a project."""


class DirectoryExistsError(InitializerError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory already exists: {self.path}")


class ProjectCreateError(InitializerError):
    """Raised when the project directory itself cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot create project directory {self.path}: {reason}")


class TemplateCopyError(InitializerError):
    """Raised when a template tree cannot be copied into the project."""

    def __init__(self, source: Path, destination: Path, reason: str) -> None:
        self.source = Path(source)
        self.destination = Path(destination)
        super().__init__(
            f"Failed to copy template {self.source} -> {self.destination}: {reason}"
        )


# ---------------------------------------------------------------------------
# Initializer
# ---------------------------------------------------------------------------


class ProjectInitializer:
    """Materialises a ``ProjectRequest`` on disk.

    The two copies run one after the other.  In the default mode a failure
    half-way through leaves the partially populated project directory
    behind; with ``config.atomic`` the tree is assembled in a staging
    directory next to the target and renamed into place only once both
    copies succeeded.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    def check_templates(self) -> list[Path]:
        """Return the template trees missing from the template root."""
        expected = [self.config.contract_template(fw) for fw in ContractFramework]
        expected += [self.config.frontend_template(fw) for fw in FrontendFramework]
        return [path for path in expected if not path.is_dir()]

    async def initialize(self, request: ProjectRequest) -> InitResult:
        """Create the project directory and copy both templates into it.

        Args:
            request: Validated project name and framework choices.

        Returns:
            An ``InitResult`` describing what was created.

        Raises:
            DirectoryExistsError: If the target path already exists.  Nothing
                is written in that case.
            ProjectCreateError: If the project (or staging) directory cannot
                be created or moved into place.
            TemplateCopyError: If either template tree cannot be copied.
        """
        target = self.config.project_path(request.name)
        if await self._exists(target):
            raise DirectoryExistsError(target)

        if self.config.atomic:
            await self._initialize_staged(request, target)
        else:
            try:
                await asyncio.to_thread(target.mkdir, parents=True)
            except FileExistsError as exc:
                raise DirectoryExistsError(target) from exc
            except OSError as exc:
                raise ProjectCreateError(target, str(exc)) from exc
            await self._populate(request, target)

        return InitResult(
            project_path=target,
            contracts_path=target / CONTRACTS_DIR,
            frontend_path=target / FRONTEND_DIR,
            files_copied=await asyncio.to_thread(count_files, target),
        )

    # -- Internals ---------------------------------------------------------

    async def _exists(self, path: Path) -> bool:
        try:
            return await asyncio.to_thread(path.exists)
        except OSError as exc:
            raise ProjectCreateError(path, str(exc)) from exc

    async def _populate(self, request: ProjectRequest, root: Path) -> None:
        """Copy the contracts template, then the frontend template, into *root*."""
        copies = [
            (self.config.contract_template(request.contract_framework), root / CONTRACTS_DIR),
            (self.config.frontend_template(request.frontend_framework), root / FRONTEND_DIR),
        ]
        for source, destination in copies:
            try:
                await asyncio.to_thread(copy_tree, source, destination)
            except OSError as exc:
                raise TemplateCopyError(source, destination, str(exc)) from exc

    async def _initialize_staged(self, request: ProjectRequest, target: Path) -> None:
        """Populate a hidden sibling directory and rename it onto *target*."""
        # Fixed-length name, independent of the project name, so it stays
        # within NAME_MAX whenever the target name does.
        staging = self.config.working_directory / f".staging-{uuid.uuid4().hex[:12]}"
        try:
            await asyncio.to_thread(staging.mkdir, parents=True)
        except OSError as exc:
            raise ProjectCreateError(staging, str(exc)) from exc
        try:
            await self._populate(request, staging)
            if await self._exists(target):
                raise DirectoryExistsError(target)
            try:
                await asyncio.to_thread(staging.rename, target)
            except OSError as exc:
                raise ProjectCreateError(target, str(exc)) from exc
        except BaseException:
            await asyncio.to_thread(shutil.rmtree, staging, ignore_errors=True)
            raise
