"""Flask service exposing the HTTP to curl conversion."""

from .app import create_app, run_server

__all__ = ["create_app", "run_server"]
