"""Allows ``python -m warehouse`` to start the server."""

from warehouse.main import cli_entry

cli_entry()
