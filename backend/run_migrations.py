#!/usr/bin/env python3
"""
Database migration runner for Supabase.

Connects directly to the Supabase PostgreSQL database and applies the SQL
files in migrations/ in name order, recording each one with a checksum.

Usage:
    python run_migrations.py             # Apply pending migrations
    python run_migrations.py --status    # Show migration status
    python run_migrations.py --dry-run   # Show what would run

Configuration:
    YOGA_SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from pathlib import Path
from typing import NamedTuple

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


class Migration(NamedTuple):
    name: str
    path: Path
    checksum: str


def load_migrations() -> list[Migration]:
    """Read migration files and compute their checksums."""
    migrations = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        checksum = hashlib.sha256(path.read_bytes()).hexdigest()[:16]
        migrations.append(Migration(path.name, path, checksum))
    return migrations


def connect():
    """Open a connection, exiting with a hint when the URL is missing."""
    settings = get_settings()
    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] YOGA_SUPABASE_DB_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def applied_migrations(conn) -> dict[str, tuple[str, object]]:
    """Return {name: (checksum, applied_at)} for recorded migrations."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                " name VARCHAR(255) PRIMARY KEY,"
                " checksum VARCHAR(64) NOT NULL,"
                " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        rows = cur.fetchall()
    conn.commit()
    return {name: (checksum, applied_at) for name, checksum, applied_at in rows}


def apply(conn, migration: Migration) -> None:
    """Run one migration and record it in the same transaction."""
    console.print(f"[blue]Applying:[/blue] {migration.name}")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name}")


def show_status(migrations: list[Migration], applied: dict) -> None:
    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")

    for migration in migrations:
        if migration.name not in applied:
            table.add_row(migration.name, "[yellow]Pending[/yellow]", "")
            continue
        checksum, applied_at = applied[migration.name]
        state = "[green]Applied[/green]" if checksum == migration.checksum else "[red]Changed[/red]"
        table.add_row(migration.name, state, str(applied_at))

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply database migrations")
    parser.add_argument("--status", action="store_true", help="Show status and exit")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    args = parser.parse_args()

    migrations = load_migrations()
    conn = connect()
    try:
        applied = applied_migrations(conn)
        if args.status:
            show_status(migrations, applied)
            return

        for migration in migrations:
            if migration.name in applied and applied[migration.name][0] != migration.checksum:
                console.print(f"[yellow]Warning:[/yellow] {migration.name} changed since it was applied")

        pending = [m for m in migrations if m.name not in applied]
        if not pending:
            console.print("[green]All migrations are up to date.[/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]Would apply:[/cyan] {migration.name}")
            else:
                apply(conn, migration)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
