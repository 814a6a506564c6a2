"""Starter Kit scaffolder -- materialises new projects from template trees.

Quick usage::

    from starter_kit.config import Config
    from starter_kit.scaffolder import ProjectInitializer, ProjectRequest

    request = ProjectRequest(
        name="demo",
        contract_framework="foundry",
        frontend_framework="VITE",
    )
    result = await ProjectInitializer(Config()).initialize(request)
"""

from starter_kit.models import ProjectRequest
from starter_kit.scaffolder.initializer import (
    DirectoryExistsError,
    InitializerError,
    ProjectCreateError,
    ProjectInitializer,
    TemplateCopyError,
)
from starter_kit.scaffolder.prompts import collect_request

__all__ = [
    "DirectoryExistsError",
    "InitializerError",
    "ProjectCreateError",
    "ProjectInitializer",
    "ProjectRequest",
    "TemplateCopyError",
    "collect_request",
]
