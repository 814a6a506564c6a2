"""Helpers run from a generated project's own build step.

Quick usage::

    from starter_kit.codegen import build_codegen_config, render_wagmi_config

    config = build_codegen_config("packages/web", project="../foundry")
    print(render_wagmi_config(config))
"""

from starter_kit.codegen.extractor import (
    extract_include_paths,
    find_contract_names,
    parse_contract_names,
)
from starter_kit.codegen.wagmi import ConfigRenderer, build_codegen_config, render_wagmi_config

__all__ = [
    "ConfigRenderer",
    "build_codegen_config",
    "extract_include_paths",
    "find_contract_names",
    "parse_contract_names",
    "render_wagmi_config",
]
