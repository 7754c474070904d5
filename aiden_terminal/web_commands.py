"""Web-engineering mode commands."""

from __future__ import annotations

from typing import Dict, List

from aiden_terminal.command_types import CommandResult, collect_descriptors, command, usage_error

_LIGHTHOUSE = """\
Lighthouse scores:
- Performance: 87/100
- Accessibility: 92/100
- Best Practices: 95/100
- SEO: 98/100

Critical metrics:
- First Contentful Paint: 0.8s
- Largest Contentful Paint: 2.3s
- Cumulative Layout Shift: 0.02
- Total Blocking Time: 120ms
- Time to Interactive: 3.1s

Recommendations:
- Optimize image loading
- Implement code splitting
- Enable text compression
- Use preconnect for critical third-party origins"""

_SEO = """\
- Title tags: Good
- Meta descriptions: 3 pages missing
- Heading structure: Well-organized
- Image alt texts: 12 images missing alt text
- URL structure: Good
- Mobile-friendliness: Excellent
- Page speed: Good
- Schema markup: Incomplete

Recommendations:
- Add missing meta descriptions
- Complete schema markup implementation
- Add alt text to all images
- Improve internal linking structure"""

_SAMPLE_RESPONSE = """\
{
  "success": true,
  "data": {
    "id": 123,
    "name": "Example Item",
    "description": "This is a sample API response",
    "created_at": "2023-04-13T12:34:56Z",
    "updated_at": "2023-04-13T12:34:56Z"
  },
  "meta": {
    "total": 42,
    "page": 1,
    "per_page": 10
  }
}"""


def _flag(options: Dict[str, str], name: str) -> bool:
    return options.get(name) != "false"


@command(
    name="create",
    summary="Create a new web project",
    usage="create <project-name> [--template=<template>] [--typescript=<true|false>]",
    examples=["create my-app", "create portfolio --template=react", "create blog --template=next --typescript=false"],
)
async def create(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Project name required. Usage: create <project-name> [options]")
    project = args[0]
    template = options.get("template", "next")
    language = "TypeScript" if _flag(options, "typescript") else "JavaScript"
    output = (
        f'Creating {language} project "{project}" using {template} template...\n'
        "✓ Initializing project\n"
        "✓ Installing dependencies\n"
        "✓ Setting up configuration files\n"
        "✓ Creating initial file structure\n"
        "✓ Adding README and documentation\n"
        "\n"
        f'Project "{project}" created successfully!\n'
        "To get started:\n"
        f"  cd {project}\n"
        "  npm run dev"
    )
    return CommandResult(output=output)


@command(
    name="build",
    summary="Build the current web project",
    usage="build [--mode=<mode>] [--optimize=<true|false>]",
    examples=["build", "build --mode=development", "build --optimize=false"],
)
async def build(args: List[str], options: Dict[str, str]) -> CommandResult:
    build_mode = options.get("mode", "production")
    optimize = "with" if _flag(options, "optimize") else "without"
    output = (
        f"Building project in {build_mode} mode {optimize} optimizations...\n"
        "✓ Compiling TypeScript\n"
        "✓ Bundling modules\n"
        "✓ Optimizing assets\n"
        "✓ Generating output files\n"
        "\n"
        "Build completed successfully!\n"
        "Output size: 245.3 KB (78.2 KB gzipped)\n"
        "Build time: 3.45s"
    )
    return CommandResult(output=output)


@command(
    name="analyze",
    summary="Analyze web project or website",
    usage="analyze [target] [--type=<analysis_type>]",
    examples=[
        "analyze",
        "analyze https://example.com",
        "analyze --type=seo",
        "analyze https://example.com --type=accessibility",
    ],
)
async def analyze(args: List[str], options: Dict[str, str]) -> CommandResult:
    target = args[0] if args else "current"
    analysis = options.get("type", "performance")
    if analysis == "performance":
        output = f"Performance analysis of {target}:\n{_LIGHTHOUSE}"
    elif analysis == "seo":
        output = f"SEO analysis of {target}:\n{_SEO}"
    else:
        output = (
            f"{analysis[:1].upper()}{analysis[1:]} analysis of {target}:\n"
            "Analysis completed successfully.\n"
            "See detailed report in analysis_report.html"
        )
    return CommandResult(output=output)


@command(
    name="deploy",
    summary="Deploy web project to hosting platform",
    usage="deploy [--target=<platform>] [--env=<environment>]",
    examples=["deploy", "deploy --target=netlify", "deploy --env=staging"],
)
async def deploy(args: List[str], options: Dict[str, str]) -> CommandResult:
    target = options.get("target", "vercel")
    environment = options.get("env", "production")
    prefix = "" if environment == "production" else f"{environment}."
    domain = "vercel.app" if target == "vercel" else f"{target}.com"
    output = (
        f"Deploying to {target} ({environment} environment)...\n"
        "✓ Building project\n"
        "✓ Running tests\n"
        "✓ Optimizing assets\n"
        "✓ Uploading files\n"
        "✓ Configuring environment\n"
        "✓ Updating DNS\n"
        "\n"
        "Deployment successful!\n"
        f"URL: https://{prefix}your-project.{domain}\n"
        "Deployment time: 45s"
    )
    return CommandResult(output=output, data={"target": target, "env": environment})


@command(
    name="api",
    summary="Make API requests",
    usage="api <endpoint> [--method=<http_method>] [--format=<response_format>]",
    examples=[
        "api https://api.example.com/users",
        "api /api/products --method=POST",
        "api https://api.example.com/data --format=xml",
    ],
)
async def api(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: API endpoint required. Usage: api <endpoint> [options]")
    method = options.get("method", "GET").upper()
    fmt = options.get("format", "json")
    output = f"Making {method} request to {args[0]}...\nStatus: 200 OK\nResponse ({fmt}):\n{_SAMPLE_RESPONSE}"
    return CommandResult(output=output)


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS"]
