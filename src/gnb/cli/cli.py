import logging

import click

from gnb.cli.output import user_output
from gnb.core.branch_creation import create_prefixed_branch
from gnb.core.config import DEBUG_ENV_VAR, PREFIX_ENV_VAR
from gnb.core.context import GnbContext, create_context
from gnb.core.errors import GnbError

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],  # terse help flags
    ignore_unknown_options=True,  # "gnb fix -v2" treats -v2 as branch text
)

EPILOG = f"""\b
Examples:
  gnb            Create username/YYMMDD branch
  gnb ABC-123    Create username/ABC-123 branch
  gnb fix login  Create username/fix-login branch

\b
Environment:
  {PREFIX_ENV_VAR}    Override username prefix (e.g., {PREFIX_ENV_VAR}=ci-bot)
  {DEBUG_ENV_VAR}     Print debug logging

The branch is created from current HEAD. Existing branch names get
a numeric suffix (_2, _3, etc.) to avoid collisions."""


def _describe_error(error: GnbError) -> str:
    """Render an error message followed by any chained gnb errors."""
    lines = [str(error)]
    cause = error.__cause__
    while isinstance(cause, GnbError):
        lines.append(f"Caused by: {cause}")
        cause = cause.__cause__
    return "\n".join(lines)


@click.command("gnb", context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(package_name="gnb")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the branch name that would be created without creating it.",
)
@click.argument("name", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, name: tuple[str, ...], dry_run: bool) -> None:
    """Create a new git branch prefixed with your username.

    NAME defaults to today's date (YYMMDD) when omitted. Multiple words are
    joined with dashes.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    gnb_ctx: GnbContext = ctx.obj

    if gnb_ctx.config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    logger.debug("Invoked: name=%s, dry_run=%s, cwd=%s", name, gnb_ctx.dry_run, gnb_ctx.cwd)

    try:
        target = create_prefixed_branch(gnb_ctx, name)
    except GnbError as e:
        user_output(click.style("❌ Error: ", fg="red") + _describe_error(e))
        raise SystemExit(1) from e

    # NoopGit has already reported the branch it would create
    if gnb_ctx.dry_run:
        return

    user_output(
        click.style("✅", fg="green")
        + f" Created and switched to branch: {click.style(target, fg='cyan')}"
    )


def main() -> None:
    """CLI entry point used by the `gnb` console script."""
    cli()
