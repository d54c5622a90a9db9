"""Flask CLI commands: the console session plus seed/reset helpers."""

import sys

import click
from flask import current_app
from flask.cli import with_appcontext

from carrental.controllers.session import SessionController, TokenReader
from carrental.models.store import Store
from carrental.utils.security import generate_hash

DEMO_ACCOUNT = ("demo", "Demo User", "Demo123")


def get_store() -> Store:
    """The store attached to the current app by create_app()."""
    return current_app.extensions["carrental.store"]


def run_session(app, stream=None) -> int:
    """Run an interactive session against the app's store."""
    reader = TokenReader(stream or sys.stdin)
    controller = SessionController.from_config(app.config, app.extensions["carrental.store"], reader)
    return controller.run()


def ensure_customer(store: Store, customer_id: str, name: str, password: str):
    """
    Ensure a customer with `customer_id` exists in the store.
    - If exists: update name and password hash (idempotent).
    - If not:   register a new customer.
    """
    if customer_id in store.directory:
        c = store.directory.find(customer_id)
        c.name = name
        c.password_hash = generate_hash(password)
        return c
    return store.directory.register(customer_id, name, password)


@click.command("session")
@with_appcontext
def session_command():
    """Start the interactive rental console."""
    code = run_session(current_app)
    if code:
        raise SystemExit(code)


@click.command("seed")
@with_appcontext
def seed_command():
    """Add the default fleet and the demo account, then save."""
    store = get_store()
    added = store.catalog.seed()
    ensure_customer(store, *DEMO_ACCOUNT)
    store.save()
    click.echo(f"Seed complete ({added} vehicle(s) added).")
    click.echo(f"Demo login: {DEMO_ACCOUNT[0]} / {DEMO_ACCOUNT[2]}")


@click.command("reset")
@with_appcontext
def reset_command():
    """Clear all vehicles and accounts, then save."""
    store = get_store()
    store.clear()
    store.save()
    click.echo(f"{store.path} has been cleared.")
    click.echo("Tip: run `flask --app carrental seed` to regenerate demo data.")


def main():
    """Console-script entry point: build the app and run a session."""
    from carrental import create_app

    app = create_app()
    with app.app_context():
        return run_session(app)
