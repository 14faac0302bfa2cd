# retirement_projection/projections/cli.py
# Command-line interface entry point (argparse)
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from logging_config import (
    DEBUG_LOGGER,
    ERROR_LOGGER,
    PERFORMANCE_LOGGER,
    PROJECTION_LOGGER,
    setup_logging,
)
from retirement_projection.config.loaders import ConfigLoadError, load_household_config
from retirement_projection.projections.assembler import assemble_projection_table, retirement_summary
from retirement_projection.projections.runner import run_household

# Get logger for this module
logger = logging.getLogger(__name__)

# Directory for log files
LOG_DIR = Path("output_dev/projection_logs")
OUTPUT_DIR = Path("output_dev/projection_results")
TABLE_FILENAME = "projection_table.csv"


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Project household retirement balances year by year.")

    # Required arguments
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to the household YAML file."
    )

    # Optional arguments
    parser.add_argument(
        "--as-of",
        type=_parse_date,
        default=None,
        help="Projection date (YYYY-MM-DD). Defaults to the file's as_of, then today."
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(OUTPUT_DIR),
        help=f"Directory for the projection table (default: {OUTPUT_DIR})"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=str(LOG_DIR),
        help=f"Directory to store log files (default: {LOG_DIR})"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def initialize_logging(debug: bool = False, log_dir: Path = LOG_DIR) -> None:
    """Initialize the logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_dir: Directory to store log files
    """
    setup_logging(log_dir=log_dir, debug=debug)

    logger.info("Starting retirement projection")
    logger.info(f"Command line arguments: {sys.argv}")
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Pandas version: {pd.__version__}")
    logger.info(f"NumPy version: {np.__version__}")

    if debug:
        logging.getLogger(DEBUG_LOGGER).debug("Debug logging enabled")


def write_projection_table(args: argparse.Namespace, output_path: Path) -> Path:
    """Load the household, project every active user and write the table.

    Returns:
        Path of the CSV written.

    Raises:
        ConfigLoadError: If the household file is missing or invalid
    """
    proj_logger = logging.getLogger(PROJECTION_LOGGER)

    logger.info(f"Loading household from: {args.config}")
    household = load_household_config(Path(args.config))

    series = run_household(household, as_of=args.as_of)
    table = assemble_projection_table(series)

    output_path.mkdir(parents=True, exist_ok=True)
    table_path = output_path / TABLE_FILENAME
    table.to_csv(table_path)
    proj_logger.info(f"Wrote {len(table)} projected years to {table_path}")

    retirement_ages = {
        user_id: household.users[user_id].retirement.age_at_retirement for user_id in series
    }
    for user_id, record in retirement_summary(series, retirement_ages).items():
        if record is None:
            proj_logger.info(f"{user_id}: retirement age {retirement_ages[user_id]} is outside the projection")
            continue
        b = record.balances
        proj_logger.info(
            f"{user_id}: at age {record.age} ({record.year}) tax-free={b.tax_free:,.2f} "
            f"tax-deferred={b.tax_deferred:,.2f} after-tax={b.after_tax:,.2f} "
            f"total={record.total_balance:,.2f}"
        )
    return table_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the retirement projection CLI."""
    err_logger = logging.getLogger(ERROR_LOGGER)

    args = parse_arguments(argv)
    initialize_logging(debug=args.debug, log_dir=Path(args.log_dir))
    logging.getLogger(PERFORMANCE_LOGGER).info("Performance monitoring initialized")
    logger.info(f"Starting projection run with arguments: {vars(args)}")

    try:
        write_projection_table(args, Path(args.output_dir))
        return 0
    except ConfigLoadError as e:
        err_logger.error(f"Invalid configuration: {e}", exc_info=True)
    except OSError as e:
        err_logger.error(f"Could not write projection output: {e}", exc_info=True)
    except Exception:
        err_logger.critical("Fatal error during projection", exc_info=True)
    return 1


if __name__ == "__main__":
    sys.exit(main())
