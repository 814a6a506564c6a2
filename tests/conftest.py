"""Shared pytest fixtures for the Starter Kit test suite.

Provides reusable fixtures for:
- A miniature template root with all four framework trees
- A ``Config`` pointing at that root and a scratch working directory
- A foundry project layout with sources and compiled artifacts
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from starter_kit.config import Config


# ---------------------------------------------------------------------------
# Template root
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, bytes] = {
    "contracts/foundry/foundry.toml": b'[profile.default]\nsrc = "src"\n',
    "contracts/foundry/src/Counter.sol": b"contract Counter {\n}\n",
    "contracts/foundry/.gitignore": b"out/\n",
    "contracts/hardhat/hardhat.config.ts": b"export default {};\n",
    "contracts/hardhat/contracts/Counter.sol": b"contract Counter {\n}\n",
    "frontend/NEXT/package.json": b'{"name": "next-app"}\n',
    "frontend/NEXT/app/page.tsx": b"export default function Home() {}\n",
    "frontend/VITE/package.json": b'{"name": "vite-app"}\n',
    "frontend/VITE/src/main.tsx": b"console.log('vite');\n",
    "frontend/VITE/public/logo.bin": bytes(range(256)),
}


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root containing contracts/{foundry,hardhat} and frontend/{NEXT,VITE}."""
    root = tmp_path / "templates"
    for rel, content in TEMPLATE_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory standing in for the current working directory."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(template_root: Path, workdir: Path) -> Config:
    return Config(templates_root=template_root, working_directory=workdir)


def tree_snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below *root* (relative posix path) to its bytes."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    """The ``tree_snapshot`` helper, for comparing copied trees."""
    return tree_snapshot


# ---------------------------------------------------------------------------
# Foundry project
# ---------------------------------------------------------------------------

@pytest.fixture
def foundry_project(tmp_path: Path) -> Path:
    """A ``foundry/`` project with two sources and partially built artifacts.

    * ``Token.sol`` declares ``Token`` and ``Burnable is Token`` -- only
      ``Token`` has been compiled.
    * ``Vault.sol`` declares ``Vault`` -- compiled.
    * ``Interfaces.sol`` declares only an interface.
    """
    project = tmp_path / "foundry"
    src = project / "src"
    out = project / "out"
    src.mkdir(parents=True)

    (src / "Token.sol").write_text(
        textwrap.dedent("""\
            // SPDX-License-Identifier: MIT
            pragma solidity ^0.8.24;

            contract Token {
                uint256 public supply;
            }

            contract Burnable is Token {
                function burn() public {}
            }
        """),
        encoding="utf-8",
    )
    (src / "Vault.sol").write_text(
        "pragma solidity ^0.8.24;\n\ncontract Vault is Ownable, Pausable {\n}\n",
        encoding="utf-8",
    )
    (src / "Interfaces.sol").write_text(
        "interface IVault {\n    function deposit() external;\n}\n",
        encoding="utf-8",
    )
    (src / "notes.txt").write_text("contract Ignored {\n}\n", encoding="utf-8")

    for rel in ("Token.sol/Token.json", "Vault.sol/Vault.json"):
        artifact = out / rel
        artifact.parent.mkdir(parents=True, exist_ok=True)
        artifact.write_text("{}", encoding="utf-8")

    return project
