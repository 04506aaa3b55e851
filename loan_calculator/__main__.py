"""Run the command line calculator with ``python -m loan_calculator``."""

from loan_calculator.adapters.inbound.cli.main import cli

cli()
