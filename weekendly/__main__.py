"""Allow ``python -m weekendly``."""

from weekendly.cli.main import app

app(prog_name="weekendly")
