"""Code generator configuration built from the extracted include paths.

``build_codegen_config`` resolves the foundry project relative to the
frontend package, runs the extractor and returns a ``CodegenConfig``.
``ConfigRenderer`` turns that object into a ``wagmi.config.ts`` file.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from starter_kit.codegen.extractor import extract_include_paths
from starter_kit.models import CodegenConfig, FoundryPluginConfig, ReactPluginConfig
from starter_kit.utils import write_text_file

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

WAGMI_TEMPLATE = "wagmi.config.ts.j2"


def build_codegen_config(
    base_dir: str | Path = ".",
    *,
    project: str = "../foundry",
    src: str = "src",
    artifacts: str = "out",
    out: str = "src/generated.ts",
    sort_files: bool = True,
) -> CodegenConfig:
    """Assemble the generator config for the frontend package at *base_dir*.

    Args:
        base_dir: Directory the generator runs from (the frontend package).
        project: Foundry project path, relative to *base_dir*.
        src: Solidity source directory, relative to the foundry project.
        artifacts: Build output directory, relative to the foundry project.
        out: Generated TypeScript file, relative to *base_dir*.
        sort_files: Forwarded to ``extract_include_paths``.
    """
    foundry_root = Path(base_dir) / project
    include = extract_include_paths(
        foundry_root / src,
        foundry_root / artifacts,
        sort_files=sort_files,
    )
    return CodegenConfig(
        out=out,
        plugins=[
            FoundryPluginConfig(project=project, artifacts=artifacts, include=include),
            ReactPluginConfig(),
        ],
    )


class ConfigRenderer:
    """Renders ``CodegenConfig`` objects through Jinja2 templates."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["js"] = _js_literal_filter

    def render(self, config: CodegenConfig, template_path: str = WAGMI_TEMPLATE) -> str:
        context: dict[str, Any] = {
            "config": config,
            "plugin_names": [plugin.name for plugin in config.plugins],
        }
        return self.env.get_template(template_path).render(**context)

    async def render_to_file(
        self,
        config: CodegenConfig,
        output_path: str | Path,
        template_path: str = WAGMI_TEMPLATE,
    ) -> Path:
        """Render *config* and write it to *output_path* (parents created)."""
        content = self.render(config, template_path)
        return await asyncio.to_thread(write_text_file, output_path, content)


def render_wagmi_config(config: CodegenConfig) -> str:
    """Render ``wagmi.config.ts`` with the default template."""
    return ConfigRenderer().render(config)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _js_literal_filter(value: Any) -> str:
    """Render a Python value as a JavaScript literal (JSON subset)."""
    return json.dumps(value, ensure_ascii=False).replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
