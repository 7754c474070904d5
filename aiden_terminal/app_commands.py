"""Application-engineering mode commands."""

from __future__ import annotations

from typing import Dict, List

from aiden_terminal.command_types import WARNING, CommandResult, collect_descriptors, command, usage_error

_TEST_RUN = """\
PASS  src/components/__tests__/Button-test.js
PASS  src/screens/__tests__/Home-test.js
PASS  src/utils/__tests__/format-test.js
PASS  src/hooks/__tests__/useAuth-test.js
FAIL  src/services/__tests__/api-test.js
  ● API Service › should handle network errors

    Expected mock function to be called with:
      ["https://api.example.com/data", {"method": "GET"}]
    But it was called with:
      ["https://api.example.com/data", {"headers": {"Content-Type": "application/json"}, "method": "GET"}]

Test Suites: 1 failed, 4 passed, 5 total
Tests:       1 failed, 23 passed, 24 total
Snapshots:   12 passed, 12 total
Time:        3.45s"""

_COVERAGE = """\
Coverage:
  Statements: 87.5%
  Branches:   79.2%
  Functions:  91.3%
  Lines:      88.1%"""

_PERFORMANCE = """\
Startup time: 1.2s
Memory usage: 78.5 MB
CPU usage: 12% avg, 35% peak
Frame rate: 58-60 fps
Battery impact: Low

Hotspots:
- ImageProcessor.processLargeImage(): 250ms
- NetworkService.fetchData(): 180ms
- RenderEngine.updateUI(): 120ms

Recommendations:
- Implement image caching
- Add background fetch for network operations
- Optimize list rendering with virtualization"""

_BUNDLE = """\
Total size: 15.7 MB
- Code: 4.2 MB
- Resources: 8.3 MB
- Assets: 3.2 MB

Largest modules:
- react-native-maps: 1.2 MB
- lodash: 0.8 MB
- moment: 0.5 MB

Recommendations:
- Replace lodash with individual imports
- Optimize image assets
- Implement code splitting"""


@command(
    name="create",
    summary="Create a new mobile or desktop app",
    usage="create <app-name> [--platform=<platform>] [--template=<template>]",
    examples=["create MyAwesomeApp", "create TaskManager --platform=flutter", "create GameApp --template=game"],
)
async def create(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: App name required. Usage: create <app-name> [options]")
    app_name = args[0]
    platform = options.get("platform", "react-native")
    template = options.get("template", "default")
    output = (
        f"Creating {app_name} app using {platform} ({template} template)...\n"
        "✓ Initializing project\n"
        "✓ Installing dependencies\n"
        "✓ Setting up native modules\n"
        "✓ Creating initial screens\n"
        "✓ Configuring navigation\n"
        "✓ Setting up testing environment\n"
        "\n"
        f'App "{app_name}" created successfully!\n'
        "To get started:\n"
        f"  cd {app_name}\n"
        "  npm run start"
    )
    return CommandResult(output=output)


@command(
    name="build",
    summary="Build app for specified platforms",
    usage="build [--platform=<platform>] [--mode=<mode>]",
    examples=["build", "build --platform=android", "build --platform=ios --mode=debug"],
)
async def build(args: List[str], options: Dict[str, str]) -> CommandResult:
    platform = options.get("platform", "all")
    build_mode = options.get("mode", "release")
    output = (
        f"Building app for {platform} platform(s) in {build_mode} mode...\n"
        "✓ Compiling source code\n"
        "✓ Bundling assets\n"
        "✓ Optimizing resources\n"
        "✓ Signing package\n"
        "✓ Generating build artifacts\n"
        "\n"
        "Build completed successfully!\n"
        "Output:\n"
        "- Android APK: ./build/app-release.apk (15.7 MB)\n"
        "- iOS IPA: ./build/app-release.ipa (18.2 MB)\n"
        "Build time: 2m 34s"
    )
    return CommandResult(output=output)


@command(
    name="test",
    summary="Run app tests",
    usage="test [--type=<test_type>] [--coverage=<true|false>]",
    examples=["test", "test --type=integration", "test --coverage=true"],
)
async def test(args: List[str], options: Dict[str, str]) -> CommandResult:
    test_type = options.get("type", "unit")
    coverage = options.get("coverage") == "true"
    lines = [f"Running {test_type} tests {'with' if coverage else 'without'} coverage...", _TEST_RUN]
    if coverage:
        lines.extend(["", _COVERAGE])
    # One suite in the fixture run fails, so the outcome is a warning.
    return CommandResult(output="\n".join(lines), status=WARNING)


@command(
    name="deploy",
    summary="Deploy app to app stores",
    usage="deploy [--platform=<platform>] [--track=<track>]",
    examples=["deploy", "deploy --platform=android", "deploy --track=beta"],
)
async def deploy(args: List[str], options: Dict[str, str]) -> CommandResult:
    platform = options.get("platform", "all")
    track = options.get("track", "production")
    output = (
        f"Deploying app to {platform} app store(s) on {track} track...\n"
        "✓ Validating build artifacts\n"
        "✓ Uploading to app stores\n"
        "✓ Updating metadata\n"
        "✓ Submitting for review\n"
        "\n"
        "Deployment submitted successfully!\n"
        "Status:\n"
        "- Google Play: Pending review (est. 2 days)\n"
        "- App Store: Waiting for review (est. 1-3 days)\n"
        "- App Store Connect: Build processing\n"
        "\n"
        "Track your submission status in the developer console."
    )
    return CommandResult(output=output)


@command(
    name="analyze",
    summary="Analyze app performance and structure",
    usage="analyze [--type=<analysis_type>] [--platform=<platform>]",
    examples=["analyze", "analyze --type=bundle", "analyze --platform=ios --type=security"],
)
async def analyze(args: List[str], options: Dict[str, str]) -> CommandResult:
    analysis = options.get("type", "performance")
    platform = options.get("platform", "all")
    if analysis == "performance":
        output = f"Performance analysis ({platform}):\n{_PERFORMANCE}"
    elif analysis == "bundle":
        output = f"Bundle size analysis ({platform}):\n{_BUNDLE}"
    else:
        output = (
            f"{analysis[:1].upper()}{analysis[1:]} analysis ({platform}):\n"
            "Analysis completed successfully.\n"
            "See detailed report in analysis_report.html"
        )
    return CommandResult(output=output)


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS"]
