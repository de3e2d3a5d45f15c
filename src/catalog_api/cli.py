"""Flask CLI commands for the catalog API."""

from __future__ import annotations

import json

import click

from .resources.category import CategoryResource

DEMO_CATEGORIES = (
    {"name": "Books", "status": 1},
    {"name": "Music", "status": 1},
    {"name": "Archive", "status": 0},
)


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("catalog-list")
    @click.option("--active", is_flag=True, default=False, help="Only list active categories")
    def catalog_list(active: bool) -> None:
        """Print categories as JSON lines."""

        from .extensions import get_repository

        repository = get_repository()
        categories = repository.find_all_active() if active else repository.find_all()
        for row in CategoryResource.collection(categories):
            click.echo(json.dumps(row))

    @app.cli.command("catalog-seed")
    @click.option("--demo", is_flag=True, default=False, help="Create demo categories")
    def catalog_seed(demo: bool) -> None:
        """Seed application data (demo)."""

        if not demo:
            click.echo("No action specified. Use --demo to seed demo data.")
            return

        from .extensions import get_repository

        repository = get_repository()
        for attributes in DEMO_CATEGORIES:
            category = repository.create(attributes)
            click.echo(f"Created category #{category.id}: {category.name}")
        click.echo(f"Seeded {len(DEMO_CATEGORIES)} categories.")
