import sys
from pathlib import Path

import click
import structlog

from superkeyloader import __version__
from superkeyloader.config import Settings
from superkeyloader.errors import KeyloaderError
from superkeyloader.logger import setup_logging, verbosity_to_level
from superkeyloader.models import Provider
from superkeyloader.registry import get_default_registry
from superkeyloader.result import fetch_keys
from superkeyloader.writer import append_keys, render_output

logger = structlog.get_logger(__name__)


@click.command(
    help="Download the public SSH keys of a GitHub or GitLab user and append "
    "them to an authorized_keys file."
)
@click.argument("username")
@click.option(
    "--provider",
    type=click.Choice([p.value for p in Provider]),
    default=Provider.GITHUB.value,
    show_default=True,
    help="Where to download the keys from.",
)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False),
    default=None,
    help="File to append the keys to. Defaults to ~/.ssh/authorized_keys.",
)
@click.option(
    "--token",
    default=None,
    help="API token, use it if you hit API rate limits. Defaults to "
    "SUPERKEYLOADER_GITHUB_TOKEN or SUPERKEYLOADER_GITLAB_TOKEN.",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing on success.")
@click.option("-m", "--human", is_flag=True, help="Human readable output.")
@click.option("-j", "--json", "json_output", is_flag=True, help="JSON output.")
@click.option(
    "-p",
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the keys instead of writing them to a file.",
)
@click.version_option(version=__version__)
def main(
    username: str,
    provider: str,
    output: str | None,
    token: str | None,
    verbose: int,
    quiet: bool,
    human: bool,
    json_output: bool,
    to_stdout: bool,
) -> None:
    if sum([human, json_output, to_stdout]) > 1:
        raise click.UsageError("--human, --json and --stdout are mutually exclusive")

    try:
        settings = Settings()
        setup_logging(
            verbosity_to_level(verbose, default=settings.log_level),
            json_format=settings.log_format_json,
        )
    except ValueError as e:
        # pydantic ValidationError is a ValueError too
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    provider_type = Provider(provider)
    api = get_default_registry(settings).get_provider(provider_type)
    path = Path(output or settings.authorized_keys_path).expanduser()

    logger.info(
        "Downloading keys", username=username, provider=provider_type.display_name
    )
    try:
        keys = fetch_keys(api, username, token or settings.token_for(provider_type))
        logger.info("Downloaded keys", count=len(keys))

        if to_stdout:
            for key in keys:
                click.echo(key)
            return

        append_keys(path, keys)
        logger.info("Appended keys", path=str(path))
    except KeyloaderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # flags have precedence, otherwise humans get a sentence and pipes get JSON
    is_human = human or (not json_output and sys.stdout.isatty())
    if not quiet:
        click.echo(render_output(keys, username, provider_type, path, human=is_human))


if __name__ == "__main__":
    main()
