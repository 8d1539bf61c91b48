"""Allow ``python -m tcalint`` to behave like the CLI entry point."""

from tcalint.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
