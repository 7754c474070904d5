"""Business-operations mode commands."""

from __future__ import annotations

from typing import Dict, List

from aiden_terminal.command_types import CommandResult, collect_descriptors, command, usage_error

_QUARTERS = (1245000, 1320000, 1410000, 1560000)

_SWOT = """\
Strengths:
- Strong brand recognition
- Innovative product lineup
- Efficient supply chain
- Talented workforce

Weaknesses:
- High production costs
- Limited international presence
- Aging IT infrastructure
- Product line gaps

Opportunities:
- Emerging markets in Asia
- Strategic acquisitions
- Digital transformation
- Sustainability initiatives

Threats:
- Increasing competition
- Regulatory changes
- Economic uncertainty
- Supply chain disruptions"""

_PESTEL = """\
Political:
- Stable political environment
- Favorable trade policies
- Government incentives for innovation

Economic:
- Moderate growth forecast
- Low interest rates
- Increasing consumer spending
- Inflation concerns

Social:
- Changing consumer preferences
- Aging population
- Increased health consciousness
- Remote work trends

Technological:
- Rapid digital transformation
- AI and automation advances
- Cybersecurity challenges
- IoT integration opportunities

Environmental:
- Sustainability regulations
- Carbon footprint reduction
- Renewable energy adoption
- Climate change impacts

Legal:
- Data privacy regulations
- Employment law changes
- Intellectual property protection
- Antitrust considerations"""

_GENERIC_FINDINGS = """\
Key findings:
1. Market position is strong but facing new challenges
2. Operational efficiency could be improved by 15-20%
3. Customer satisfaction metrics show positive trends
4. Investment in technology infrastructure recommended
5. Competitive landscape becoming more crowded"""


@command(
    name="forecast",
    summary="Generate financial forecasts",
    usage="forecast [--period=<time_period>] [--model=<forecast_model>] [--years=<num_years>]",
    examples=["forecast", "forecast --period=monthly --years=2", "forecast --model=exponential"],
)
async def forecast(args: List[str], options: Dict[str, str]) -> CommandResult:
    period = options.get("period", "quarterly")
    model = options.get("model", "linear")
    years = options.get("years", "1")
    total = sum(_QUARTERS)
    lines = [f"Generating {period} financial forecast using {model} model for {years} year(s)...", "Revenue forecast:"]
    lines.extend(f"Q{index}: ${amount:,}" for index, amount in enumerate(_QUARTERS, start=1))
    lines.extend([f"Total annual forecast: ${total:,}", "Growth rate: 12.5%", "Confidence interval: 85%"])
    data = {
        "period": period,
        "model": model,
        "years": years,
        "quarters": list(_QUARTERS),
        "total": total,
        "growth": 0.125,
    }
    return CommandResult(output="\n".join(lines), data=data)


@command(
    name="kpi",
    summary="Generate Key Performance Indicator reports",
    usage="kpi [--dept=<department>] [--period=<time_period>]",
    examples=["kpi", "kpi --dept=sales", "kpi --dept=marketing --period=q2"],
)
async def kpi(args: List[str], options: Dict[str, str]) -> CommandResult:
    department = options.get("dept", "all")
    period = options.get("period", "current")
    output = (
        f"KPI Report for {department} department ({period} period):\n"
        "Revenue: $1,245,000 (↑ 8.3%)\n"
        "Customer Acquisition Cost: $125 (↓ 5.2%)\n"
        "Customer Lifetime Value: $3,200 (↑ 12.1%)\n"
        "Churn Rate: 2.4% (↓ 0.3%)\n"
        "Net Promoter Score: 72 (↑ 4)\n"
        "Employee Satisfaction: 4.2/5 (↑ 0.3)"
    )
    return CommandResult(output=output)


@command(
    name="resource",
    summary="Manage and allocate resources",
    usage="resource <type> [--action=<action>] [--amount=<quantity>]",
    examples=["resource personnel", "resource budget --action=forecast", "resource equipment --amount=25"],
)
async def resource(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Resource type required. Usage: resource <type> [options]")
    action = options.get("action", "allocate")
    amount = options.get("amount", "10")
    output = (
        f"Resource {action} for {args[0]}:\n"
        f"Current allocation: {amount} units\n"
        "Utilization: 78%\n"
        "Efficiency rating: High\n"
        "Bottlenecks: None detected\n"
        "Recommendations: Consider 5% increase in Q3 based on growth projections"
    )
    return CommandResult(output=output)


@command(
    name="report",
    summary="Generate business reports",
    usage="report [--type=<report_type>] [--period=<time_period>] [--format=<output_format>]",
    examples=["report", "report --type=marketing --period=annual", "report --type=operations --format=pdf"],
)
async def report(args: List[str], options: Dict[str, str]) -> CommandResult:
    report_type = options.get("type", "financial")
    period = options.get("period", "quarterly")
    fmt = options.get("format", "text")
    output = (
        f"Generating {report_type} report for {period} period in {fmt} format...\n"
        "Report Summary:\n"
        "- Revenue: $1,245,000\n"
        "- Expenses: $980,000\n"
        "- Profit: $265,000\n"
        "- Profit Margin: 21.3%\n"
        "- YoY Growth: 15.2%\n"
        "- Market Share: 12.8%\n"
        f"Report saved as {report_type}_{period}_report.{fmt}"
    )
    return CommandResult(output=output)


@command(
    name="analyze",
    summary="Perform business analysis",
    usage="analyze <target> [--method=<analysis_method>]",
    examples=["analyze market", "analyze competition --method=swot", "analyze industry --method=pestel"],
)
async def analyze(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Analysis target required. Usage: analyze <target> [options]")
    target = args[0]
    method = options.get("method", "swot")
    if method == "swot":
        output = f"SWOT Analysis for {target}:\n{_SWOT}"
    elif method == "pestel":
        output = f"PESTEL Analysis for {target}:\n{_PESTEL}"
    else:
        output = f"Analysis of {target} using {method} method:\n{_GENERIC_FINDINGS}"
    return CommandResult(output=output)


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS"]
