# src/guidedtour/cli.py
"""
Command-line interface for the guided tour
"""

import argparse
import logging
import platform
import sys

import psutil

from . import __version__
from .config import TourConfig
from .runner import default_runner


_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def format_bytes(num_bytes):
    """Human-readable size using 1024-based units."""
    size = float(num_bytes)
    for unit in _SIZE_UNITS[:-1]:
        if abs(size) < 1024:
            break
        size /= 1024
    else:
        unit = _SIZE_UNITS[-1]
    return f"{size:.2f} {unit}"


def print_system_info():
    """Print the environment the tour is running in."""
    print(f"guidedtour v{__version__} - System Information")
    print("=" * 50)

    print("\nPython:")
    print(f"  Version: {platform.python_version()} ({platform.python_implementation()})")
    print(f"  Platform: {platform.platform()}")

    print("\nCPU Information:")
    print(f"  Physical cores: {psutil.cpu_count(logical=False)}")
    print(f"  Logical cores: {psutil.cpu_count(logical=True)}")

    vm = psutil.virtual_memory()
    print("\nSystem Memory:")
    print(f"  Total: {format_bytes(vm.total)}")
    print(f"  Available: {format_bytes(vm.available)} ({vm.percent:.1f}% used)")
    print("=" * 50)


def list_pages(runner):
    """Print the registered pages."""
    for page in runner.pages:
        print(f"  {page.name:<14} {page.title}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="guidedtour",
        description="A guided tour of language features through small examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  guidedtour                               # Run every page
  guidedtour --list                        # Show the available pages
  guidedtour --page enumerations           # Run a single page
  guidedtour --page concurrency --server backup
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'guidedtour v{__version__}'
    )
    parser.add_argument('--list', action='store_true', help='List the pages and exit')
    parser.add_argument(
        '--page',
        action='append',
        dest='pages',
        metavar='NAME',
        help='Run only this page (repeatable, runs in the given order)'
    )
    parser.add_argument(
        '--server',
        default=TourConfig.server,
        help='Server used by the concurrency page (default: %(default)s)'
    )
    parser.add_argument('--no-headers', action='store_true', help='Do not print page headers')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--system-info', action='store_true', help='Print system information first')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = TourConfig(
        verbose=args.verbose,
        show_headers=not args.no_headers,
        server=args.server,
    )
    runner = default_runner(config)

    if args.list:
        list_pages(runner)
        return 0

    try:
        selected = runner.select(args.pages)
    except ValueError as e:
        parser.error(str(e))

    if args.system_info:
        print_system_info()

    runner.run([p.name for p in selected])
    return 0


if __name__ == "__main__":
    sys.exit(main())
