#!/usr/bin/env python3
"""Run the demo session (or a session config) with live play-by-play."""

import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console

from dicegame.config import demo_config, load_config
from dicegame.reporting.console import render_standings
from dicegame.session import SessionRunner

config = load_config(Path(sys.argv[1])) if len(sys.argv) > 1 else demo_config()
console = Console()
runner = SessionRunner(config, console=console)

console.print(f"Running session: {config.name} ({len(config.games)} games)", markup=False)
result = runner.run()

console.print()
render_standings(console, result)
console.print(f"Telemetry: {result.telemetry_dir}", markup=False)
