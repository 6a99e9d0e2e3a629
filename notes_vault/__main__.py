"""Entry point for ``python -m notes_vault``."""

from notes_vault.server import run_server

run_server()
