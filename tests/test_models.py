"""Unit tests for the shared models (starter_kit.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from starter_kit.models import (
    CodegenConfig,
    ContractFramework,
    ContractInfo,
    EmptyProjectNameError,
    FoundryPluginConfig,
    FrontendFramework,
    InvalidProjectNameError,
    ProjectRequest,
    ReactPluginConfig,
    validate_project_name,
)

pytestmark = pytest.mark.unit


class TestValidateProjectName:
    def test_strips_whitespace(self):
        assert validate_project_name("  demo  ") == "demo"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_rejected(self, name: str):
        with pytest.raises(EmptyProjectNameError, match="cannot be empty"):
            validate_project_name(name)

    @pytest.mark.parametrize("name", [".", "..", "a/b", "..\\evil", "/abs"])
    def test_path_like_rejected(self, name: str):
        with pytest.raises(InvalidProjectNameError):
            validate_project_name(name)

    def test_errors_are_value_errors(self):
        assert issubclass(EmptyProjectNameError, ValueError)
        assert issubclass(InvalidProjectNameError, ValueError)


class TestProjectRequest:
    def test_accepts_string_choices(self):
        request = ProjectRequest(name="demo", contract_framework="foundry", frontend_framework="VITE")
        assert request.contract_framework is ContractFramework.FOUNDRY
        assert request.frontend_framework is FrontendFramework.VITE

    def test_name_is_stripped(self):
        request = ProjectRequest(name=" demo ", contract_framework="hardhat", frontend_framework="NEXT")
        assert request.name == "demo"

    def test_blank_name_fails_validation(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            ProjectRequest(name="  ", contract_framework="foundry", frontend_framework="NEXT")

    @pytest.mark.parametrize(
        "contracts, frontend",
        [("truffle", "NEXT"), ("foundry", "next"), ("FOUNDRY", "VITE")],
    )
    def test_unknown_framework_fails_validation(self, contracts: str, frontend: str):
        with pytest.raises(ValidationError):
            ProjectRequest(name="demo", contract_framework=contracts, frontend_framework=frontend)


class TestContractInfo:
    def test_include_path(self):
        info = ContractInfo(file_name="Token.sol", contract_name="Token")
        assert info.include_path == "Token.sol/Token.json"


class TestCodegenConfig:
    def test_defaults(self):
        config = CodegenConfig()
        assert config.out == "src/generated.ts"
        assert config.plugins == []
        assert config.foundry is None

    def test_foundry_lookup(self):
        foundry = FoundryPluginConfig(include=["A.sol/A.json"])
        config = CodegenConfig(plugins=[ReactPluginConfig(), foundry])
        assert config.foundry == foundry

    def test_json_round_trip_keeps_plugin_kinds(self):
        config = CodegenConfig(
            plugins=[FoundryPluginConfig(include=["A.sol/A.json"]), ReactPluginConfig()]
        )
        restored = CodegenConfig.model_validate_json(config.model_dump_json())
        assert isinstance(restored.plugins[0], FoundryPluginConfig)
        assert isinstance(restored.plugins[1], ReactPluginConfig)
        assert restored == config
