"""CLI utilities for database setup and reporting."""

# purpose: give administrators schema bootstrap, seeding and report export without the API
# status: active
# depends_on: backend.dnaflow.database, backend.dnaflow.seed, backend.dnaflow.services.reports

from __future__ import annotations

import json

import typer

from .. import models  # noqa: F401  registers tables on Base.metadata
from ..database import Base, SessionLocal, engine
from ..seed import seed_database
from ..services import reports

app = typer.Typer(help="DNA workflow database maintenance commands")


@app.command("init-db")
def init_db() -> None:
    """Create every table on the configured database."""

    Base.metadata.create_all(bind=engine)
    typer.echo(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")


@app.command()
def seed() -> None:
    """Insert the default users, processes, workflow and worksheets."""

    with SessionLocal() as session:
        inserted = seed_database(session)
    typer.echo("Seed data inserted" if inserted else "Database already contains data; nothing inserted")


@app.command()
def report(group_id: int = typer.Argument(..., help="Workflow group id")) -> None:
    """Print the ordered worksheet report of a workflow group as JSON lines."""

    with SessionLocal() as session:
        rows = reports.build_group_report(session, group_id)
    if not rows:
        typer.echo(f"Workflow group {group_id} has no worksheets", err=True)
        raise typer.Exit(code=1)
    for row in rows:
        typer.echo(json.dumps(row.model_dump()))


if __name__ == "__main__":
    app()
