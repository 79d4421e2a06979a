"""Run the live scenarios through pytest."""

import logging
import os
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SUITE = Path("tests/e2e")


class SuiteRunner:
    """Build and run the pytest command for the e2e suite."""

    def __init__(
        self,
        config_path: Path | None = None,
        headed: bool = False,
        keyword: str | None = None,
    ):
        self.config_path = config_path
        self.headed = headed
        self.keyword = keyword

    def build_command(self, suite_path: Path = DEFAULT_SUITE) -> list[str]:
        cmd = [sys.executable, "-m", "pytest", str(suite_path), "-m", "e2e", "-v"]
        if self.config_path:
            cmd += ["--swaglabs-config", str(self.config_path)]
        if self.headed:
            cmd.append("--headed")
        if self.keyword:
            cmd += ["-k", self.keyword]
        return cmd

    def run(self, suite_path: Path = DEFAULT_SUITE) -> int:
        """Run the suite and return pytest's exit code."""
        cmd = self.build_command(suite_path)
        logger.debug("Running: %s", " ".join(cmd))

        result = subprocess.run(
            cmd,
            cwd=Path.cwd(),
            env={**os.environ, "PYTHONPATH": f"{os.getcwd()}:{os.environ.get('PYTHONPATH', '')}"},
        )
        return result.returncode
