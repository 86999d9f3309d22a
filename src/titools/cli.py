"""
Generic CLI dispatcher for titools.

Feature subpackages register their own subcommands via register_commands().
"""

import argparse
import sys

from titools import __version__


def build_parser():
    parser = argparse.ArgumentParser(
        prog="titools",
        description="Titanium SDK skills CLI: manage skills and agents for AI coding assistants.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    from titools.knowledge import register_commands as register_knowledge_commands
    from titools.skills import register_commands as register_skill_commands

    register_skill_commands(subparsers)
    register_knowledge_commands(subparsers)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
