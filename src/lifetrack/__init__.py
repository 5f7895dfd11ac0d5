"""lifetrack - personal finance and lifestyle tracker."""

__version__ = "0.1.0"


def __getattr__(name):
    # The CLI pulls in the database layer, so only load it on demand
    if name == "main":
        from lifetrack.cli.main import main

        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
