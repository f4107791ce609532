"""Module-level app for ``uvicorn simphy_scriptgen.server.app:app``."""

from simphy_scriptgen.server.main import create_app

app = create_app()
