"""Allow ``python -m histograph_import``."""

from .cli_app import app

app(prog_name="histograph-import")
