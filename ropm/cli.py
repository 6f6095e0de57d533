#!/usr/bin/env python3
# ropm/cli.py
import argparse
import sys

from rich.markup import escape

from ropm import __version__
from ropm.pkgmanager import exit_code, find, install, remove
from ropm.prompts import Prompts
from ropm.utils.errors import configure_logging
from ropm.utils.output import console

COMMANDS = {
    "find": "Search for a package in both repositories",
    "install": "Install a package (choose between Containerized or Normal)",
    "remove": "Remove a package (choose between Containerized or Normal)",
}


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {escape(message)}\n")
        self.print_help()
        sys.exit(1)


def parse_args(argv=None):
    parser = RichParser(
        prog="ropm",
        description="ropm: one front-end for Flatpak and the system package manager",
        epilog="\n".join(f"  {k:<10} {v}" for k, v in COMMANDS.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-y", "--yes", dest="auto_confirm", action="store_true",
        help="Automatic confirmation for operations",
    )
    parser.add_argument(
        "-b", "--backend", type=str.lower, choices=["c", "n"], default=None,
        help="Skip the backend question: c for Containerized, n for Normal",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("command", choices=list(COMMANDS), help="Action to perform")
    parser.add_argument("package", help="Package name, search query or App ID")

    args = parser.parse_args(argv)
    if not args.package.strip():
        parser.error("a package name is required")
    return args


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    prompts = Prompts(auto_confirm=args.auto_confirm, backend=args.backend)

    if args.command == "find":
        result = find(args.package)
    elif args.command == "install":
        result = install(args.package, prompts)
    else:
        result = remove(args.package, prompts)

    sys.exit(exit_code(result))


if __name__ == "__main__":
    main()
