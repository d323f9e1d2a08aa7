"""hop - Main entry point."""

from app.interfaces.cli.commands import cli


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
