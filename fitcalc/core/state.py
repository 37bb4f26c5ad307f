"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from rich.console import Console


def _stderr_console() -> Console:
    return Console(stderr=True, log_time=False, log_path=False)


@dataclass
class CLIState:
    """CLI runtime options and loaded configuration."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    log_console: Console = field(default_factory=_stderr_console)

    def debug(self, text: str) -> None:
        """Trace line on stderr, shown only with --verbose and never in JSON mode."""
        if self.verbose and not self.json_output:
            self.log_console.log(text)
