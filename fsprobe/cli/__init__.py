"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from fsprobe.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from fsprobe.api.config.get_package_version import get_package_version

        print(f"fsprobe {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="fsprobe")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
