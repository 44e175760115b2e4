"""Command line interface for CI pipelines.

Exit codes:
    0  success, no changes
    1  changes detected
    2  invalid configuration, nothing discovered or unreadable input
    3  snapshot could not be written
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from compscan.application.change_detection import ChangeDetector
from compscan.application.discovery import ComponentScanner, require_components
from compscan.application.reporters import ConsoleReporter, JsonReporter, PlainTextReporter
from compscan.application.snapshot import compare_snapshots
from compscan.application.strategies import validate_all
from compscan.domain.exceptions import ConfigurationError, NoComponentsError
from compscan.infrastructure.adapters import ClassDirectoryTypeSource
from compscan.infrastructure.config import load_configuration
from compscan.infrastructure.storage import DEFAULT_DIRECTORY, FileSnapshotStore, read_snapshot

if TYPE_CHECKING:
    from collections.abc import Sequence

    from compscan.domain.model.comparison import ComparisonResult
    from compscan.domain.model.component import ContainerComponents
    from compscan.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_INVALID = 2
EXIT_WRITE_FAILED = 3

_REPORTERS = {
    "text": PlainTextReporter,
    "console": ConsoleReporter,
    "json": JsonReporter,
}


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser with one subcommand per mode."""
    parser = argparse.ArgumentParser(
        prog="compscan",
        description="Discover components in compiled classes and detect architectural changes",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default="text",
        choices=sorted(_REPORTERS),
        help="Report format (default: text)",
    )
    modes = parser.add_subparsers(dest="mode", required=True)

    for name, help_text in (
        ("change-detect", "Scan, compare with the latest snapshot and save"),
        ("serialize-only", "Scan and save a snapshot without comparing"),
        ("baseline", "Scan and save the initial baseline snapshot"),
    ):
        mode = modes.add_parser(name, help=help_text)
        mode.add_argument("config", type=Path, help="Discovery configuration (JSON)")
        mode.add_argument(
            "--snapshot-dir",
            type=Path,
            default=DEFAULT_DIRECTORY,
            help=f"Snapshot directory (default: {DEFAULT_DIRECTORY})",
        )
        mode.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="Max seconds for scanning one container root",
        )

    report = modes.add_parser("report", help="Compare two snapshot files")
    report.add_argument("old", type=Path, help="Previous snapshot")
    report.add_argument("new", type=Path, help="Current snapshot")

    return parser


def discover(config: Path, timeout: float | None = None) -> dict[str, ContainerComponents]:
    """Load configuration, validate it and scan every container.

    Raises:
        ConfigurationError: If configuration is invalid
        NoComponentsError: If nothing was discovered
    """
    configuration = load_configuration(config)
    validate_all(s for s in configuration.strategies if s.enabled)

    scanner = ComponentScanner(configuration, ClassDirectoryTypeSource(timeout=timeout))
    results = scanner.scan_all()
    require_components(results)
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    reporter: ReporterProtocol = _REPORTERS[args.output_format]()

    if args.mode == "report":
        return _report(args.old, args.new, reporter)

    try:
        containers = discover(args.config, args.timeout)
    except (ConfigurationError, NoComponentsError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    detector = ChangeDetector(FileSnapshotStore(args.snapshot_dir))
    try:
        return _save(args.mode, detector, containers, reporter, args.snapshot_dir)
    except OSError as e:
        logger.error("Failed to save snapshot to %s", args.snapshot_dir, exc_info=True)
        print(f"error: cannot save snapshot to {args.snapshot_dir}: {e}", file=sys.stderr)
        return EXIT_WRITE_FAILED


def _save(
    mode: str,
    detector: ChangeDetector,
    containers: dict[str, ContainerComponents],
    reporter: ReporterProtocol,
    snapshot_dir: Path,
) -> int:
    """Save the new snapshot; change-detect also compares and reports."""
    if mode == "change-detect":
        detection = detector.detect_changes(containers)
        if detection.is_baseline:
            print("No previous snapshot; all components reported as new.")
        return _emit(detection.result, reporter)

    snapshot = detector.create_baseline(containers)
    print(f"Snapshot saved with {snapshot.component_count} component(s) to {snapshot_dir}")
    return EXIT_OK


def _report(old_path: Path, new_path: Path, reporter: ReporterProtocol) -> int:
    """Compare two snapshot files. A missing old snapshot reports all as new."""
    new = read_snapshot(new_path)
    if new is None:
        print(f"error: cannot read snapshot {new_path}", file=sys.stderr)
        return EXIT_INVALID
    return _emit(compare_snapshots(read_snapshot(old_path), new), reporter)


def _emit(result: ComparisonResult, reporter: ReporterProtocol) -> int:
    print(reporter.report(result))
    return EXIT_CHANGES if result.has_changes else EXIT_OK
