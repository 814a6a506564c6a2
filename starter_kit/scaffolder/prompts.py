"""Interactive collection of a ``ProjectRequest``.

Values passed in explicitly (positional project name, ``--contracts`` and
``--frontend`` flags) are used as is; everything else is asked for on the
shared Rich console.
"""

from __future__ import annotations

from rich.prompt import Prompt

from starter_kit.models import (
    DEFAULT_PROJECT_NAME,
    ContractFramework,
    FrontendFramework,
    ProjectNameError,
    ProjectRequest,
    validate_project_name,
)
from starter_kit.utils import console, print_error


def ask_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Prompt until a usable project name is entered."""
    while True:
        answer = Prompt.ask("Enter your project name", default=default, console=console)
        try:
            return validate_project_name(answer)
        except ProjectNameError as exc:
            print_error(str(exc))


def ask_contract_framework() -> ContractFramework:
    answer = Prompt.ask(
        "Choose a smart contract framework",
        choices=[fw.value for fw in ContractFramework],
        default=ContractFramework.FOUNDRY.value,
        console=console,
    )
    return ContractFramework(answer)


def ask_frontend_framework() -> FrontendFramework:
    answer = Prompt.ask(
        "Choose a frontend framework",
        choices=[fw.value for fw in FrontendFramework],
        default=FrontendFramework.NEXT.value,
        console=console,
    )
    return FrontendFramework(answer)


def collect_request(
    name: str | None = None,
    contract_framework: ContractFramework | str | None = None,
    frontend_framework: FrontendFramework | str | None = None,
) -> ProjectRequest:
    """Build a ``ProjectRequest``, prompting for whatever was not supplied.

    A *name* given up front is validated without re-prompting, so a blank
    positional argument fails with ``EmptyProjectNameError``.
    """
    if name is None:
        name = ask_project_name()
    else:
        name = validate_project_name(name)

    if contract_framework is None:
        contract_framework = ask_contract_framework()
    if frontend_framework is None:
        frontend_framework = ask_frontend_framework()

    return ProjectRequest(
        name=name,
        contract_framework=ContractFramework(contract_framework),
        frontend_framework=FrontendFramework(frontend_framework),
    )
