"""Module entrypoint for `python -m seal_schema.cli`.

Delegates to the CLI implementation.
"""

from .run_cli import run


if __name__ == "__main__":
    run()
