"""Command-line layer for the ``jsonc`` tool.

``cli`` and ``main`` resolve lazily so that ``python -m jsonc_cli.cli.main``
does not find the module already imported by this package.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(name)
