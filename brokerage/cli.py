"""CLI tools for brokerage administration."""

from datetime import datetime, timedelta, timezone

import click

from brokerage.core.config import settings
from brokerage.db.seed_data import SAMPLE_PROPERTIES
from brokerage.db.session import SessionLocal
from brokerage.schemas.property import PropertyCreate
from brokerage.services import notification_service, property_service
from brokerage.utils import normalize_search


@click.group()
def cli():
    """Brokerage CLI tools."""
    pass


@cli.command()
def seed_properties():
    """
    Load the sample Lagos listings.

    Listings whose title already exists are skipped, so the command can be
    re-run safely.

    Example:
        brokerage seed-properties
    """
    db = SessionLocal()
    try:
        existing = {normalize_search(p.get("title")) for p in property_service.list_properties(db)}
        created = 0
        for sample in SAMPLE_PROPERTIES:
            if normalize_search(sample["title"]) in existing:
                click.echo(f"- Skipped existing listing: {sample['title']}")
                continue
            record = property_service.create_property(db, PropertyCreate.model_validate(sample))
            click.echo(f"✓ Created {record['id']}: {record['title']}")
            created += 1
        click.echo(f"✓ Seeded {created} listing(s)")
    except Exception as e:
        db.rollback()
        click.echo(f"❌ Error: {e}")
        raise SystemExit(1)
    finally:
        db.close()


@cli.command()
def list_admins():
    """Print the configured admin allow-list."""
    admins = sorted(settings.admin_emails_set)
    if not admins:
        click.echo("No admin emails configured (set ADMIN_EMAILS)")
        return
    for email in admins:
        click.echo(email)


@cli.command()
@click.option("--older-than-days", type=click.IntRange(min=1), required=True, help="Age threshold in days")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
def purge_notifications(older_than_days: int, yes: bool):
    """
    Delete admin and user notifications older than N days.

    Notifications never expire on their own; this is the manual retention tool.
    """
    cutoff = datetime.now(timezone.utc) - timedelta(days=older_than_days)
    cutoff_iso = cutoff.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    if not yes:
        click.confirm(f"Delete notifications created before {cutoff_iso}?", abort=True)

    db = SessionLocal()
    try:
        removed = notification_service.purge_older_than(db, cutoff_iso)
        click.echo(f"✓ Removed {removed} notification(s)")
    finally:
        db.close()


if __name__ == "__main__":
    cli()
