from __future__ import annotations

import asyncio

import pytest

from aiden_terminal import (
    app_commands,
    binary_commands,
    business_commands,
    general_commands,
    physics_commands,
    security_commands,
    web_commands,
)
from aiden_terminal.command_executor import CommandExecutor
from aiden_terminal.command_types import ERROR, INFO, SUCCESS, WARNING, CommandResult
from aiden_terminal.modes import (
    APPLICATION_ENGINEERING,
    BINARY_ANALYSIS,
    BUSINESS_OPERATIONS,
    GENERAL_PURPOSE,
    PHYSICS_RESEARCH,
    SECURITY_ASSESSMENT,
    WEB_ENGINEERING,
)

_TABLES = [
    general_commands.COMMANDS,
    security_commands.COMMANDS,
    binary_commands.COMMANDS,
    business_commands.COMMANDS,
    web_commands.COMMANDS,
    app_commands.COMMANDS,
    physics_commands.COMMANDS,
]


def _execute(line: str, mode: str) -> CommandResult:
    return asyncio.run(CommandExecutor().execute(line, mode))


@pytest.mark.parametrize("table", _TABLES)
def test_descriptors_carry_help_metadata(table) -> None:
    assert table
    for name, descriptor in table.items():
        assert descriptor.name == name
        assert descriptor.summary
        assert descriptor.usage.startswith(name)
        assert descriptor.examples
        assert all(example.startswith(name) for example in descriptor.examples)


def test_general_commands() -> None:
    assert _execute('echo "Hello, world!"', GENERAL_PURPOSE).output == "Hello, world!"
    assert _execute("whoami", GENERAL_PURPOSE).output == "AIDEN Terminal User"
    assert _execute("pwd", GENERAL_PURPOSE).output == "/home/aiden"
    assert _execute("version", GENERAL_PURPOSE).output == "AIDEN Terminal v1.0.0"
    assert _execute("about", GENERAL_PURPOSE).status == INFO
    assert "README.md" in _execute("ls -la", GENERAL_PURPOSE).output


def test_base_commands_available_in_mode() -> None:
    result = _execute("echo still here", PHYSICS_RESEARCH)

    assert result.output == "still here"


@pytest.mark.parametrize(
    "line, mode, message",
    [
        ("scan", SECURITY_ASSESSMENT, "Error: Target required. Usage: scan <target> [options]"),
        ("brute ssh", SECURITY_ASSESSMENT, "Error: Service and target required."),
        ("disasm", BINARY_ANALYSIS, "Error: Binary file required."),
        ("resource", BUSINESS_OPERATIONS, "Error: Resource type required."),
        ("create", WEB_ENGINEERING, "Error: Project name required."),
        ("create", APPLICATION_ENGINEERING, "Error: App name required."),
        ("convert 5", PHYSICS_RESEARCH, "Error: Value and units required."),
    ],
)
def test_missing_arguments_return_error_results(line: str, mode: str, message: str) -> None:
    result = _execute(line, mode)

    assert result.status == ERROR
    assert result.output.startswith(message)


def test_scan_reports_structured_data() -> None:
    result = _execute("scan 192.168.1.1 --type=comprehensive", SECURITY_ASSESSMENT)

    assert result.status == SUCCESS
    assert result.data["target"] == "192.168.1.1"
    assert result.data["scanType"] == "comprehensive"
    assert result.data["openPorts"] == [22, 80, 443]


def test_offensive_simulations_warn() -> None:
    brute = _execute("brute ssh 192.168.1.1", SECURITY_ASSESSMENT)
    mitm = _execute("mitm eth0 192.168.1.0/24", "red-teaming")

    assert brute.status == WARNING
    assert mitm.status == WARNING
    assert "simulated operation" in mitm.output


def test_business_forecast_totals_quarters() -> None:
    result = _execute("forecast --years=2", BUSINESS_OPERATIONS)

    assert result.data["total"] == sum(result.data["quarters"])
    assert result.data["years"] == "2"
    assert "Total annual forecast:" in result.output


def test_web_deploy_builds_environment_url() -> None:
    staging = _execute("deploy --target=vercel --env=staging", WEB_ENGINEERING)
    production = _execute("deploy --target=netlify", WEB_ENGINEERING)

    assert staging.data == {"target": "vercel", "env": "staging"}
    assert "URL: https://staging.your-project.vercel.app" in staging.output
    assert "URL: https://your-project.netlify.com" in production.output


def test_app_test_run_warns_and_adds_coverage() -> None:
    plain = _execute("test", APPLICATION_ENGINEERING)
    covered = _execute("test --coverage=true", APPLICATION_ENGINEERING)

    assert plain.status == WARNING
    assert "without coverage" in plain.output
    assert len(covered.output) > len(plain.output)


def test_app_analyze_keeps_type_casing() -> None:
    result = _execute("analyze --type=iOS-security", APPLICATION_ENGINEERING)

    assert result.output.startswith("IOS-security analysis (all):")


def test_mode_specific_analyze_differs_per_mode() -> None:
    physics = _execute("analyze data.dat --viz=false", PHYSICS_RESEARCH)
    binary = _execute("analyze", BINARY_ANALYSIS)

    assert "without visualization" in physics.output
    assert binary.status == ERROR


def test_physics_convert_electronvolts() -> None:
    result = _execute("convert 5 eV J", PHYSICS_RESEARCH)

    assert result.status == SUCCESS
    assert result.data["result"] == pytest.approx(5 * physics_commands.ELECTRONVOLT_IN_JOULES)
    assert "5 eV = 8.01088e-19 J" in result.output


def test_physics_convert_angstrom() -> None:
    result = _execute("convert 10 Å m", PHYSICS_RESEARCH)

    assert result.data["result"] == pytest.approx(1e-9)
    assert "10 Å = 1e-09 m" in result.output


def test_physics_convert_rejects_non_numeric_value() -> None:
    result = _execute("convert five eV J", PHYSICS_RESEARCH)

    assert result.status == ERROR
    assert result.output == "Error: Value must be numeric, got 'five'"


def test_physics_convert_unknown_units_defaults_to_si() -> None:
    result = _execute("convert 2.5 Tesla", PHYSICS_RESEARCH)

    assert result.status == SUCCESS
    assert result.output.startswith("Converting 2.5 Tesla to SI:")
    assert result.data is None


def test_physics_equation_variants() -> None:
    assert "Ĥψ = Eψ" in _execute("equation schrodinger", PHYSICS_RESEARCH).output
    assert "∇ · B = 0" in _execute("equation maxwell --vars=vacuum", PHYSICS_RESEARCH).output
    assert _execute("equation relativity", PHYSICS_RESEARCH).output.startswith("Relativity equation")
