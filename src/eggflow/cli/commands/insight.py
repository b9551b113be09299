"""AI farm insight command."""

import click
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.domain.insight import InsightService


@click.command("insight")
@click.option(
    "--api-key", envvar="GEMINI_API_KEY", help="Gemini API key (overrides GEMINI_API_KEY environment variable)"
)
@click.option("--model", "model_name", help="Gemini model name")
@click.option("--date", "date_str", help="Day to analyze back from (default: today)")
@click.option("--dry-run", is_flag=True, help="Print the prompt and customer activity without calling the model")
@click.pass_context
def insight(ctx, api_key: str | None, model_name: str | None, date_str: str | None, dry_run: bool):
    """Ask Gemini for a short consultant summary of the last 30 days.

    Customers with no sale in the last 30 days are listed as inactive.
    """
    store = ctx.obj["store"]
    as_of = parse_date_or_exit(ctx, date_str)
    service = InsightService(store)

    if dry_run:
        for activity in service.classify_customers(as_of):
            status = "active" if activity.is_active else "inactive"
            last = activity.last_sale_date or "never"
            click.echo(f"{activity.account.name}: {status} (last sale: {last})")
        click.echo("")
        click.echo(service.build_prompt(service.build_snapshot(as_of)))
        return

    if not api_key:
        click.echo("Error: A Gemini API key is required (set GEMINI_API_KEY or pass --api-key)", err=True)
        ctx.exit(1)

    # Imported here so the rest of the CLI works without the Gemini client.
    from eggflow.services.gemini import DEFAULT_MODEL, GeminiInsightGenerator

    generator = GeminiInsightGenerator(api_key, model_name or DEFAULT_MODEL)
    click.echo(service.generate_insight(generator, as_of))


def register_commands(cli):
    """Register insight command with main CLI."""
    cli.add_command(insight)
