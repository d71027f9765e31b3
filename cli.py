"""Command-line entry point for a benchmark generation run.

The run takes no arguments: settings come from the first TOML file found in
the default locations (``omega_benchmarks.toml``, ``config.toml``,
``~/.omega_benchmarks.toml``, ``config/config.toml``) or, failing that, from
the ``reference`` preset.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_DIR = Path("logs")


def _setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure root logger to log to stdout and a log file.

    Args:
        verbose: If ``True`` set console log level to ``DEBUG`` else ``INFO``.
        log_file: Optional path to a log file. If ``None`` a timestamped file is
            created under ``logs/``.
    """
    if log_file is None:
        LOG_DIR.mkdir(exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = LOG_DIR / f"omega_benchmarks_{timestamp}.log"

    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(log_format))
    handlers.append(console_handler)

    # File handler (always DEBUG for maximum detail)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(log_format))
    handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG, handlers=handlers)
    logging.debug("Logging initialised. Log file: %s", log_file)


def run() -> int:
    """Load settings, run the pipeline and return the process exit code."""
    from omega_benchmarks.config.settings import get_config
    from omega_benchmarks.config.validate import check_environment
    from omega_benchmarks.data.automaton_generator import InfeasibleParameters
    from omega_benchmarks.data.task_bundler import PersistenceFailure
    from omega_benchmarks.pipeline import run_pipeline

    logger = logging.getLogger(__name__)

    try:
        check_environment()
        settings = get_config()
    except Exception as exc:  # pylint: disable=broad-except
        logger.error("Failed to load configuration: %s", exc)
        return 1

    root_handlers = logging.getLogger().handlers
    if settings.verbose and root_handlers:
        # Console handler is installed first by _setup_logging
        root_handlers[0].setLevel(logging.DEBUG)

    try:
        summary = run_pipeline(settings)
    except InfeasibleParameters as exc:
        logger.error("Generation did not converge: %s", exc)
        return 2
    except PersistenceFailure as exc:
        logger.error("Aborting run: %s", exc)
        return 3

    logger.info("Wrote %d tasks to %s", len(summary.tasks), settings.output_dir)
    return 0


def main() -> None:
    """CLI entry point."""
    _setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
