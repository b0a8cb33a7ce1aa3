"""Application assembly and the command that serves it."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from flask import Flask

from footballsys import club, index, train
from footballsys.store import Store


def create_app(store: Store, secret_key: str) -> Flask:
    """Build the web application with all route groups registered."""
    root = Path.cwd()
    app = Flask(__name__, template_folder=str(root / "templates"), static_folder=str(root / "static"))
    app.secret_key = secret_key
    app.config["SESSION_COOKIE_NAME"] = "mysession"
    for module in (index, club, train):
        app.register_blueprint(module.create_blueprint(store))
    return app


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="footballsys")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8080")))
    parser.add_argument("--database", default="fbsys.db")
    args = parser.parse_args(argv)
    with Store(args.database) as store:
        create_app(store, "secret").run(host="0.0.0.0", port=args.port)
    return 0