"""Entry point for ``python -m staticdeploy``."""

from staticdeploy.ui.cli.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
