"""Entry point script for running assets-mapper from a source checkout."""

from assets_mapper.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
