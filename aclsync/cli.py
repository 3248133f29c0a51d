import sys
from pathlib import Path

import click

from aclsync.__about__ import __version__
from aclsync.acl.entry import format_entries
from aclsync.api import FailedEvent
from aclsync.commands import Outcome, check, load_store, reconcile_all
from aclsync.helpers.handle_errors import handle_errors
from aclsync.providers import PosixAclProvider, ProviderError

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to load instead of searching the default locations",
)
verbose_option = click.option("-v", "--verbose", is_flag=True, help="Trace every evaluation", default=False)


@click.group()
@click.version_option(__version__)
def main():
    pass


@main.command()
@config_option
@handle_errors
def validate(config_path: Path | None):
    store = load_store(config_path)
    resources = store.state.config.resources()
    click.echo(f"{len(resources)} acl resource(s) are valid")


@main.command(name="check")
@config_option
@verbose_option
@handle_errors
def check_command(config_path: Path | None, verbose: bool):
    store = load_store(config_path, verbose=verbose)
    provider = PosixAclProvider(additive_check=store.state.config.provider.additive_check)
    failed = False
    for resource in store.state.config.resources():
        try:
            in_sync = check(resource, provider, store=store)
        except ProviderError as e:
            store.dispatch(FailedEvent(path=resource.path, error=e))
            failed = True
            click.echo(click.style(f"{resource.path}: {e}", fg="red"))
            if e.stderr:
                click.echo(e.stderr, err=True)
            continue
        if in_sync:
            click.echo(f"{resource.path}: in sync")
        else:
            failed = True
            click.echo(click.style(f"{resource.path}: out of sync ({resource.action})", fg="yellow"))
    if failed:
        sys.exit(1)


@main.command()
@config_option
@verbose_option
@click.option('--dry-run', help="Do not change any ACL", is_flag=True, default=False)
@handle_errors
def apply(config_path: Path | None, verbose: bool, dry_run: bool):
    store = load_store(config_path, verbose=verbose)
    provider = PosixAclProvider(additive_check=store.state.config.provider.additive_check)
    results = reconcile_all(store, provider, dry_run=dry_run)
    failed = False
    for path, result in results.items():
        match result:
            case ProviderError():
                failed = True
                click.echo(click.style(f"{path}: {result}", fg="red"))
                if result.stderr:
                    click.echo(result.stderr, err=True)
            case Outcome.no_change:
                click.echo(f"{path}: in sync")
            case Outcome.dry_run:
                click.echo(click.style(f"{path}: would change (dry run)", fg="yellow"))
            case Outcome.changed:
                click.echo(click.style(f"{path}: changed", fg="green"))
    if failed:
        sys.exit(1)


@main.command()
@click.argument("path", type=click.Path(path_type=Path))
@handle_errors
def show(path: Path):
    entries = PosixAclProvider().current_entries(path.absolute(), recursive=False)
    click.echo(format_entries(entries))


if __name__ == "__main__":
    main()
