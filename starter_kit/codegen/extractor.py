"""Contract reference extraction for the code generator's foundry plugin.

Scans a directory of Solidity sources for ``contract <Name>`` declarations
and keeps the ones whose compiled artifact already exists under the build
output directory.  Uses pure regex scanning; nothing is cached, so every
call reflects the current state of both directories.
"""

from __future__ import annotations

import re
from pathlib import Path

from starter_kit.models import ContractInfo

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SOURCE_SUFFIX = ".sol"
ARTIFACT_SUFFIX = ".json"

# ``contract Name {`` or ``contract Name is A, B {``
_CONTRACT_PATTERN = re.compile(r"contract\s+([a-zA-Z0-9_]+)\s+(?:is\s+[^{]+)?\s*\{")


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

def list_source_files(src_dir: str | Path, *, sort_files: bool = True) -> list[Path]:
    """Return the ``.sol`` files directly inside *src_dir*.

    With ``sort_files=False`` the platform's directory-listing order is kept.
    A missing directory yields an empty list.
    """
    directory = Path(src_dir)
    if not directory.is_dir():
        return []
    files = [
        p for p in directory.iterdir()
        if p.name.endswith(SOURCE_SUFFIX) and p.is_file()
    ]
    if sort_files:
        files.sort(key=lambda p: p.name)
    return files


def parse_contract_names(file_name: str, content: str) -> list[ContractInfo]:
    """Extract every contract declaration from *content*, in text order."""
    return [
        ContractInfo(file_name=file_name, contract_name=match.group(1))
        for match in _CONTRACT_PATTERN.finditer(content)
    ]


def find_contract_names(src_dir: str | Path, *, sort_files: bool = True) -> list[ContractInfo]:
    """Scan every Solidity file in *src_dir* for contract declarations."""
    contracts: list[ContractInfo] = []
    for source in list_source_files(src_dir, sort_files=sort_files):
        content = source.read_text(encoding="utf-8", errors="replace")
        contracts.extend(parse_contract_names(source.name, content))
    return contracts


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_include_paths(
    src_dir: str | Path,
    out_dir: str | Path,
    *,
    sort_files: bool = True,
) -> list[str]:
    """Return ``<file>/<Contract>.json`` for every compiled contract.

    Args:
        src_dir: Directory holding the ``.sol`` sources.
        out_dir: Build output directory with one sub-directory per source
            file, each holding ``<Contract>.json`` artifacts.
        sort_files: Scan source files in lexicographic order (default) so the
            result does not depend on the filesystem's listing order.

    Returns:
        Include paths in discovery order.  Contracts without an artifact are
        skipped silently; an empty list is a valid result.
    """
    artifacts_root = Path(out_dir)
    include: list[str] = []
    for contract in find_contract_names(src_dir, sort_files=sort_files):
        if (artifacts_root / contract.file_name / f"{contract.contract_name}{ARTIFACT_SUFFIX}").exists():
            include.append(contract.include_path)
    return include
