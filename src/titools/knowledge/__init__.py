"""Knowledge block feature: registers the `agents` command into the dispatcher."""


def register_commands(subparsers) -> None:
    """Register the 'agents' subcommand with the top-level dispatcher."""
    parser = subparsers.add_parser(
        "agents",
        help="Add the Titanium knowledge block to AGENTS.md/CLAUDE.md/GEMINI.md",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project path (defaults to current directory)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Do not prompt; create CLAUDE.md when no AI file exists",
    )
    parser.set_defaults(func=_cmd_agents)


def _cmd_agents(args) -> int:
    from titools.knowledge.installer import run_agents

    return run_agents(args.path, force=args.force)
