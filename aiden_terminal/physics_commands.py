"""Physics-research mode commands."""

from __future__ import annotations

from typing import Dict, List, Tuple

from aiden_terminal.command_types import CommandResult, collect_descriptors, command, usage_error

ELECTRONVOLT_IN_JOULES = 1.602176634e-19
ANGSTROM_IN_METRES = 1e-10

# (from, to) -> (factor, description)
_CONVERSIONS: Dict[Tuple[str, str], Tuple[float, str]] = {
    ("eV", "J"): (ELECTRONVOLT_IN_JOULES, "1.602176634 × 10⁻¹⁹ J/eV"),
    ("Å", "m"): (ANGSTROM_IN_METRES, "1 × 10⁻¹⁰ m/Å"),
}

_QUANTUM_RESULTS = """\
Initializing quantum state...
Applying Hamiltonian...
Computing time evolution...
Calculating observables...

Results:
- Ground state energy: -124.37 eV
- First excited state: -115.82 eV
- Transition probability: 0.0342
- Coherence time: 0.89 ps
- Entanglement entropy: 2.34

Simulation completed in 12.5s
Data saved to quantum_sim_results.dat"""

_FLUID_RESULTS = """\
Initializing fluid state...
Setting boundary conditions...
Solving Navier-Stokes equations...
Computing pressure and velocity fields...

Results:
- Reynolds number: 2500
- Maximum velocity: 12.4 m/s
- Pressure gradient: 0.35 Pa/m
- Turbulence intensity: 8.2%
- Energy dissipation rate: 0.042 J/s

Simulation completed in 18.7s
Visualization saved to fluid_sim_results.png"""

_ORBITALS = """\
Computing electron orbitals...
Solving Schrödinger equation...
Calculating probability densities...

Results:
1s orbital:
- Energy: -13.6 eV
- Radius (mean): 0.529 Å
- Probability density peak: 0.398 Å⁻³

2s orbital:
- Energy: -3.4 eV
- Radius (mean): 2.116 Å
- Probability density peak: 0.049 Å⁻³

2p orbital:
- Energy: -3.4 eV
- Radius (mean): 1.984 Å
- Angular distribution: cos²θ

Calculation completed in 5.2s
Data saved to orbital_calc_results.dat"""

_SCHRODINGER = """\
Time-independent Schrödinger equation:
Ĥψ = Eψ

Where:
- Ĥ is the Hamiltonian operator
- ψ is the wave function
- E is the energy eigenvalue

For a particle in a 1D box of length L:
ψₙ(x) = √(2/L) sin(nπx/L)
Eₙ = n²π²ħ²/(2mL²)

For n = 1, 2, 3:
E₁ = π²ħ²/(2mL²) = [value] eV
E₂ = 4π²ħ²/(2mL²) = [value] eV
E₃ = 9π²ħ²/(2mL²) = [value] eV"""

_MAXWELL = """\
∇ · E = ρ/ε₀
∇ · B = 0
∇ × E = -∂B/∂t
∇ × B = μ₀J + μ₀ε₀∂E/∂t

Where:
- E is the electric field
- B is the magnetic field
- ρ is the charge density
- J is the current density
- ε₀ is the permittivity of free space
- μ₀ is the permeability of free space

In differential form, these equations describe how electric and magnetic fields \
are generated by charges, currents, and changes of the fields."""


def _title(word: str) -> str:
    return word[:1].upper() + word[1:]


@command(
    name="simulate",
    summary="Run physics simulations",
    usage="simulate <type> [--particles=<count>] [--time=<units>] [--dimensions=<dims>]",
    examples=["simulate quantum", "simulate fluid --particles=1000", "simulate molecular --time=100 --dimensions=2"],
)
async def simulate(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Simulation type required. Usage: simulate <type> [options]")
    kind = args[0]
    particles = options.get("particles", "100")
    duration = options.get("time", "10")
    dimensions = options.get("dimensions", "3")
    scope = f"with {particles} particles over {duration} time units in {dimensions}D:"
    if kind == "quantum":
        output = f"Quantum system simulation {scope}\n{_QUANTUM_RESULTS}"
    elif kind == "fluid":
        output = f"Fluid dynamics simulation {scope}\n{_FLUID_RESULTS}"
    else:
        output = (
            f"{_title(kind)} simulation {scope}\n"
            "Initializing system...\n"
            "Computing interactions...\n"
            "Solving equations of motion...\n"
            "Analyzing results...\n"
            "\n"
            "Simulation completed successfully.\n"
            f"Data saved to {kind}_sim_results.dat"
        )
    return CommandResult(output=output)


@command(
    name="calculate",
    summary="Perform physics calculations",
    usage="calculate <type> [--precision=<level>] [--method=<method>]",
    examples=["calculate orbital", "calculate field --precision=extreme", "calculate trajectory --method=analytical"],
)
async def calculate(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Calculation type required. Usage: calculate <type> [options]")
    kind = args[0]
    precision = options.get("precision", "high")
    method = options.get("method", "numerical")
    if kind == "orbital":
        output = f"Orbital calculation ({method} method, {precision} precision):\n{_ORBITALS}"
    else:
        output = (
            f"{_title(kind)} calculation ({method} method, {precision} precision):\n"
            "Setting up model parameters...\n"
            "Evaluating expressions...\n"
            "\n"
            "Calculation completed successfully.\n"
            f"Data saved to {kind}_calc_results.dat"
        )
    return CommandResult(output=output)


@command(
    name="analyze",
    summary="Analyze physics data",
    usage="analyze <file> [--method=<method>] [--viz=<true|false>]",
    examples=[
        "analyze experiment_data.dat",
        "analyze simulation_results.csv --method=fourier",
        "analyze quantum_data.dat --viz=false",
    ],
)
async def analyze(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Data file required. Usage: analyze <file> [options]")
    method = options.get("method", "statistical")
    visualize = options.get("viz", "true") == "true"
    lines = [
        f"Analyzing {args[0]} using {method} methods {'with' if visualize else 'without'} visualization:",
        "Loading data...",
        "Preprocessing...",
        f"Applying {method} analysis...",
        "Computing correlations...",
        "Extracting features...",
        "",
        "Results:",
        "- Mean value: 42.37 ± 0.12",
        "- Standard deviation: 3.85",
        "- Correlation dimension: 2.34",
        "- Lyapunov exponent: 0.028",
        "- Power spectrum peak: 137.5 Hz",
        "",
        "Analysis completed in 7.8s",
    ]
    if visualize:
        lines.append("Visualization saved to analysis_results.png")
    return CommandResult(output="\n".join(lines))


@command(
    name="convert",
    summary="Convert between physics units",
    usage="convert <value> <from_unit> [to_unit]",
    examples=["convert 5 eV J", "convert 10 Å m", "convert 2.5 Tesla Gauss"],
)
async def convert(args: List[str], options: Dict[str, str]) -> CommandResult:
    if len(args) < 2:
        return usage_error("Error: Value and units required. Usage: convert <value> <from> [to] [options]")
    value, from_unit = args[0], args[1]
    to_unit = args[2] if len(args) > 2 else "SI"
    header = f"Converting {value} {from_unit} to {to_unit}:"
    conversion = _CONVERSIONS.get((from_unit, to_unit))
    if conversion is None:
        output = (
            f"{header}\n"
            "Conversion completed.\n"
            f"{value} {from_unit} = [converted value] {to_unit}\n"
            "See conversion_table.txt for more details."
        )
        return CommandResult(output=output)

    try:
        magnitude = float(value)
    except ValueError:
        return usage_error(f"Error: Value must be numeric, got {value!r}")
    factor, description = conversion
    converted = magnitude * factor
    output = f"{header}\n{value} {from_unit} = {converted:g} {to_unit}\nConversion factor: {description}"
    return CommandResult(
        output=output,
        data={"value": magnitude, "from": from_unit, "to": to_unit, "result": converted},
    )


@command(
    name="equation",
    summary="Display and explain physics equations",
    usage="equation <type> [--vars=<variable_set>]",
    examples=["equation schrodinger", "equation maxwell --vars=vacuum", "equation relativity --vars=extended"],
)
async def equation(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Equation type required. Usage: equation <type> [options]")
    kind = args[0]
    variables = options.get("vars", "default")
    if kind == "schrodinger":
        output = f"Schrödinger equation solver (variables: {variables}):\n{_SCHRODINGER}"
    elif kind == "maxwell":
        output = f"Maxwell's equations (variables: {variables}):\n{_MAXWELL}"
    else:
        output = (
            f"{_title(kind)} equation (variables: {variables}):\n"
            "Equation displayed.\n"
            "See equation_reference.pdf for more details."
        )
    return CommandResult(output=output)


COMMANDS = collect_descriptors(globals())


__all__ = ["ANGSTROM_IN_METRES", "COMMANDS", "ELECTRONVOLT_IN_JOULES"]
