"""Main entry point for the blogconf CLI."""

from blogconf.cli.click_app import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
