"""Security-assessment mode commands.

All offensive operations are simulations and never touch the network.
"""

from __future__ import annotations

from typing import Dict, List

from aiden_terminal.command_types import WARNING, CommandResult, collect_descriptors, command, usage_error

_SIMULATION_NOTICE = (
    "This is a simulated operation for educational purposes only.\n"
    "No actual {label} is being performed.\n"
    "In a real security assessment, proper authorization would be required."
)


@command(
    name="scan",
    summary="Perform a network scan on a target",
    usage="scan <target> [--type=<scan_type>] [--ports=<port_range>]",
    examples=["scan 192.168.1.1", "scan example.com --type=comprehensive", "scan 10.0.0.1 --ports=1-65535"],
)
async def scan(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Target required. Usage: scan <target> [options]")
    target = args[0]
    scan_type = options.get("type", "basic")
    ports = options.get("ports", "1-1000")
    output = (
        f"Scanning {target} ({scan_type} scan, ports {ports})...\n"
        f"Scan results for {target}:\n"
        "PORT   STATE SERVICE\n"
        "22/tcp open  ssh\n"
        "80/tcp open  http\n"
        "443/tcp open  https\n"
        "Scan completed in 3.45s"
    )
    data = {"target": target, "scanType": scan_type, "ports": ports, "openPorts": [22, 80, 443]}
    return CommandResult(output=output, data=data)


@command(
    name="vuln",
    summary="Perform a vulnerability scan on a target",
    usage="vuln <target> [--depth=<scan_depth>]",
    examples=["vuln 192.168.1.1", "vuln example.com --depth=deep", "vuln 10.0.0.1 --depth=quick"],
)
async def vuln(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Target required. Usage: vuln <target> [options]")
    target = args[0]
    depth = options.get("depth", "medium")
    findings = [
        {"severity": "MEDIUM", "id": "CVE-2023-1234", "description": "OpenSSH version outdated"},
        {"severity": "HIGH", "id": "CVE-2023-5678", "description": "SQL Injection in login form"},
        {"severity": "LOW", "id": None, "description": "Information disclosure in HTTP headers"},
    ]
    lines = [f"Vulnerability scan for {target} (depth: {depth})...", f"Found {len(findings)} potential vulnerabilities:"]
    for finding in findings:
        label = f"{finding['id']}: " if finding["id"] else ""
        lines.append(f"[{finding['severity']}] {label}{finding['description']}")
    lines.append("Scan completed in 12.7s")
    return CommandResult(
        output="\n".join(lines),
        data={"target": target, "depth": depth, "vulnerabilities": findings},
    )


@command(
    name="brute",
    summary="Simulate a brute force attack (for educational purposes only)",
    usage="brute <service> <target> [--timeout=<seconds>] [--wordlist=<list_name>]",
    examples=["brute ssh 192.168.1.1", "brute ftp example.com --timeout=60", "brute web 10.0.0.1 --wordlist=common"],
)
async def brute(args: List[str], options: Dict[str, str]) -> CommandResult:
    if len(args) < 2:
        return usage_error("Error: Service and target required. Usage: brute <service> <target> [options]")
    service, target = args[0], args[1]
    timeout = options.get("timeout", "30")
    wordlist = options.get("wordlist", "default")
    output = (
        f"Brute force attempt against {service} on {target} (timeout: {timeout}s, wordlist: {wordlist})...\n"
        + _SIMULATION_NOTICE.format(label="brute force attack")
    )
    return CommandResult(output=output, status=WARNING)


@command(
    name="mitm",
    summary="Simulate a man-in-the-middle attack (for educational purposes only)",
    usage="mitm <interface> <target>",
    examples=["mitm eth0 192.168.1.0/24", "mitm wlan0 192.168.1.5"],
)
async def mitm(args: List[str], options: Dict[str, str]) -> CommandResult:
    if len(args) < 2:
        return usage_error("Error: Interface and target required. Usage: mitm <interface> <target> [options]")
    iface, target = args[0], args[1]
    output = (
        f"Man-in-the-middle simulation on interface {iface} targeting {target}...\n"
        + _SIMULATION_NOTICE.format(label="MITM attack")
    )
    return CommandResult(output=output, status=WARNING)


@command(
    name="report",
    summary="Generate a security assessment report",
    usage="report [--format=<format>] [--output=<filename>]",
    examples=["report", "report --format=pdf", "report --format=html --output=client-assessment"],
)
async def report(args: List[str], options: Dict[str, str]) -> CommandResult:
    fmt = options.get("format", "text")
    target = options.get("output", "security-report")
    output = (
        f"Generating security report in {fmt} format...\n"
        "Report will include all scan results and findings from the current session.\n"
        f"Report saved as {target}.{fmt}"
    )
    return CommandResult(output=output)


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS"]
