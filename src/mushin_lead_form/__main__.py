"""Allow running with python -m mushin_lead_form."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
