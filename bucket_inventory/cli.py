"""
Command-line interface and main entry point for the bucket inventory.

Loads credentials, wires the pipeline to boto3 and prints the report.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from contextlib import contextmanager

from .cancellation import CancellationToken
from .client_adapter import Boto3StorageClient, boto3_client_factory
from .client_factory import create_s3_client, load_credentials_from_env
from .config import DEFAULT_REGION, AclFailurePolicy, InventorySettings
from .errors import ConfigError, InventoryError, RunCancelledError
from .orchestrator import InventoryOrchestrator
from .region_resolver import RegionResolver
from .reporting import print_fatal, print_header, print_record, print_summary

EXIT_CANCELLED = 130


def parse_args(argv: list[str]) -> InventorySettings:
    """Parse command-line arguments into InventorySettings."""
    parser = argparse.ArgumentParser(
        description="List every S3 bucket with its default encryption key."
    )
    parser.add_argument(
        "--env-file",
        help="Path to the .env file holding AWS credentials (default: $AWS_ENV_FILE or ~/.env).",
    )
    parser.add_argument(
        "--region",
        default=DEFAULT_REGION,
        help=f"Region of the endpoint used for listing buckets and looking up their locations (default: {DEFAULT_REGION}).",
    )
    parser.add_argument(
        "--skip-acl-errors",
        action="store_true",
        help="Log ACL lookup failures and continue instead of aborting the run.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    return InventorySettings(
        env_path=args.env_file,
        control_region=args.region,
        acl_failure_policy=AclFailurePolicy.SKIP if args.skip_acl_errors else AclFailurePolicy.FATAL,
        verbose=args.verbose,
    )


def build_orchestrator(settings: InventorySettings) -> InventoryOrchestrator:
    """
    Wire the pipeline to boto3.

    Raises:
        ConfigError: If credentials cannot be loaded
    """
    credentials = load_credentials_from_env(settings.env_path)
    control_client = Boto3StorageClient(
        create_s3_client(settings.control_region, credentials), region=settings.control_region
    )
    resolver = RegionResolver(
        control_client, boto3_client_factory(credentials), default_region=DEFAULT_REGION
    )
    return InventoryOrchestrator(
        control_client, resolver, acl_policy=settings.acl_failure_policy
    )


@contextmanager
def cancel_on_interrupt(token: CancellationToken):
    """
    Cancel the token on the first Ctrl+C while the block runs.

    The first interrupt also reinstates the previous SIGINT handler, so a
    second Ctrl+C raises KeyboardInterrupt inside an in-flight call. The
    previous handler is always restored on exit.
    """
    previous = signal.getsignal(signal.SIGINT)
    if previous is None:
        previous = signal.default_int_handler

    def _signal_handler(_signum, _frame):
        logging.warning("Interrupt received, cancelling inventory run (press Ctrl+C again to stop now)")
        token.cancel()
        signal.signal(signal.SIGINT, previous)

    signal.signal(signal.SIGINT, _signal_handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bucket inventory CLI."""
    settings = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        orchestrator = build_orchestrator(settings)
    except ConfigError as e:
        print(f"configuration error, {e}")
        return 1

    token = CancellationToken()

    print_header()
    try:
        with cancel_on_interrupt(token):
            report = orchestrator.run(token, on_record=print_record)
    except RunCancelledError as e:
        print_fatal(e)
        return EXIT_CANCELLED
    except KeyboardInterrupt:
        print_fatal(RunCancelledError("the in-flight request completed"))
        return EXIT_CANCELLED
    except InventoryError as e:
        failed_phase = orchestrator.failed_phase
        logging.error("Inventory aborted while %s", failed_phase.value if failed_phase else "starting")
        print_fatal(e)
        return 1

    print_summary(report)
    return 0
