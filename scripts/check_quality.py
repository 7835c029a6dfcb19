#!/usr/bin/env python3
"""Run ruff and mypy over the svcgen package."""

import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

CHECKS = [
    (["ruff", "check", "svcgen", "tests"], "Ruff Lint"),
    (["ruff", "format", "--check", "svcgen", "tests"], "Ruff Format"),
    (["mypy", "svcgen"], "Mypy Type Check"),
]


def run_command(command: list[str], description: str) -> bool:
    bin_dir = Path(sys.executable).parent
    if (bin_dir / command[0]).exists():
        command = [str(bin_dir / command[0]), *command[1:]]

    console.print(f"[bold blue]Running {description}...[/bold blue]")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        console.print(f"[bold red]{description} FAILED[/bold red]")
        return False
    console.print(f"[bold green]{description} PASSED[/bold green]")
    return True


def main():
    results = [run_command(list(command), description) for command, description in CHECKS]
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
