import os
import sys
import logging
import argparse

import uvloop

# Add the current directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from configuration import (
    STORAGE_TYPE, STORAGE_TYPES, DATA_CONTAINER, LOG_CONTAINER, LOG_WRITE_MODE
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Set up logging (only if not already configured)."""
    if not logging.root.handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
        )


class BlobConsoleCLI:
    """Interactive console for a blob storage container."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            description='Blob Storage Console',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Credentials and endpoints are read from the environment
(R2_ENDPOINT, R2_ACCESS_KEY_ID, R2_SECRET_ACCESS_KEY for R2;
S3_ENDPOINT, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_REGION for S3).

Examples:
  # Manage the 'pictures' container on R2, logging into 'logs'
  python cli.py --storage r2 --container pictures

  # Keep every record of the day in the operation log
  python cli.py --storage s3 --log-mode append --log-reads
            """
        )

        parser.add_argument('--storage', choices=STORAGE_TYPES, default=STORAGE_TYPE,
                            help=f'Storage type to use (default: {STORAGE_TYPE})')
        parser.add_argument('--container', type=str, default=DATA_CONTAINER,
                            help=f'Container holding the blobs (default: {DATA_CONTAINER})')
        parser.add_argument('--log-container', type=str, default=LOG_CONTAINER,
                            help=f'Container receiving operation logs (default: {LOG_CONTAINER})')
        parser.add_argument('--log-mode', choices=['overwrite', 'append'], default=LOG_WRITE_MODE,
                            help=f'How records are written to the daily log blob (default: {LOG_WRITE_MODE})')
        parser.add_argument('--log-reads', action='store_true',
                            help='Also write download results to the operation log')
        parser.add_argument('--overwrite-downloads', action='store_true',
                            help='Allow downloads to replace existing local files')
        parser.add_argument('--verbose', action='store_true',
                            help='Enable debug logging')

        return parser

    async def run_console(self, args, input_func=input, output=print):
        """Open the store and run the interactive menu."""
        from common.storage_factory import create_storage_system
        from console.menu import CommandMenu
        from gateway.storage_gateway import StorageGateway
        from persistence.operation_log import LogWriteMode, OperationLogger

        storage_system = create_storage_system(args.storage)

        async with storage_system:
            operation_log = OperationLogger(
                storage_system, args.log_container, mode=LogWriteMode(args.log_mode)
            )
            gateway = StorageGateway(storage_system, operation_log, log_reads=args.log_reads)
            menu = CommandMenu(
                gateway,
                args.container,
                input_func=input_func,
                output=output,
                overwrite_downloads=args.overwrite_downloads,
            )
            logger.info(
                f"Console ready on {args.storage.upper()} container '{args.container}' "
                f"(logs: '{args.log_container}', mode: {args.log_mode})"
            )
            await menu.run()
        return 0

    def run(self, args=None):
        """Run the CLI with the given arguments."""
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)
        setup_logging(parsed_args.verbose)

        try:
            return uvloop.run(self.run_console(parsed_args))
        except KeyboardInterrupt:
            logger.info("Operation interrupted by user")
            return 1
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            return 1
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            return 1


def main():
    """Main entry point."""
    cli = BlobConsoleCLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
