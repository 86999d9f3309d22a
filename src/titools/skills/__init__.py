"""Skills feature: registers install, update and uninstall into the dispatcher."""


def register_commands(subparsers) -> None:
    install = subparsers.add_parser(
        "install",
        help="Install Titanium skills and agents to your AI coding assistant",
    )
    install.add_argument(
        "-a",
        "--all",
        dest="all_platforms",
        action="store_true",
        help="Install to all detected platforms without prompting",
    )
    install.add_argument(
        "--path",
        dest="custom_path",
        help="Install skills to a custom path (skips platform linking)",
    )
    install.set_defaults(func=_cmd_install)

    update = subparsers.add_parser(
        "update", help="Update Titanium skills and docs to the latest version"
    )
    update.set_defaults(func=_cmd_update)

    uninstall = subparsers.add_parser(
        "uninstall", help="Remove Titanium skills and agents"
    )
    uninstall.set_defaults(func=_cmd_uninstall)


def _cmd_install(args) -> int:
    from titools.skills.commands import run_install

    return run_install(all_platforms=args.all_platforms, custom_path=args.custom_path)


def _cmd_update(args) -> int:
    from titools.skills.commands import run_update

    return run_update()


def _cmd_uninstall(args) -> int:
    from titools.skills.commands import run_uninstall

    return run_uninstall()
