import click
from flask import current_app
from flask.cli import with_appcontext

from library_loans.extensions import db
from library_loans.seeders.loaders import run_seeders


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the users, books and loans tables."""
    db.create_all()
    click.echo("Tables created")


@click.command("seed")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, exists=True),
    default=None,
    help="Directory holding users.csv, books.csv and library-loans.csv.",
)
@with_appcontext
def seed_command(data_dir):
    """Fill the tables from CSV files."""
    data_dir = data_dir or current_app.config["SEED_DATA_DIR"]
    current_app.logger.info("Starting seeders from %s", data_dir)

    summary = run_seeders(db.session, data_dir)

    for table, count in summary.items():
        click.echo(f"{table}: {'FAILED' if count is None else count}")

    if any(count is None for count in summary.values()):
        raise click.ClickException("Some seeders failed, see the log for details")
    click.echo("Seeders loaded successfully")
