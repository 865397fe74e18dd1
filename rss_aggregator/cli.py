"""Command-line interface for the rss_aggregator application."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, parse_app_config
from .errors import AggregatorError
from .runner import RunConfig, execute

logger = logging.getLogger(__name__)

PROMPT = "Enter the name of the XML file to aggregate from: "


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Render the RSS 2.0 feeds listed in an index file as HTML pages."
    )
    parser.add_argument(
        "index",
        nargs="?",
        help="Path or URL of the XML index listing the feeds. Prompted for if omitted.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an optional configuration XML file.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory the generated pages are written to. Overrides config.",
    )
    parser.add_argument(
        "--index-file",
        default=None,
        help="File name of the generated index page. Overrides config.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Network timeout in seconds for each fetch. Overrides config.",
    )

    # Overrides for logging/debugging
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides config.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides config.",
    )

    return parser


def configure_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Initialise logging according to options."""
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        if log_path.parent and not log_path.parent.exists():
            log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.debug(
            "Logger initialised with level %s and file output to %s",
            level_name.upper(),
            log_path,
        )
    else:
        logger.debug(
            "Logger initialised with console output at level %s", level_name.upper()
        )


def prompt_for_index() -> str:
    print(PROMPT)
    return input().strip()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = parse_app_config(args.config) if args.config else AppConfig()

        # Determine logging settings (CLI overrides Config)
        log_level = args.log_level or app_config.logging.level
        log_file = args.log_file or app_config.logging.file

        configure_logging(log_level, log_file)

        index = args.index or app_config.index or prompt_for_index()
        if not index:
            raise ValueError("No index file given.")

        config = RunConfig(
            index=index,
            output_dir=args.output_dir or app_config.output_dir,
            index_file=args.index_file or app_config.index_file,
            timeout=args.timeout if args.timeout is not None else app_config.timeout,
            user_agent=app_config.user_agent,
        )
        logger.info("Active configuration: %s", config)

        result = execute(config)
    except ValueError as exc:
        parser.error(str(exc))
    except (AggregatorError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error during execution.")
        return 1

    logger.info(
        "Finished: %d generated, %d skipped", len(result.generated), len(result.skipped)
    )
    return 0
