import sys
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

import click
import msgspec

from aclsync.providers.base import ProviderError

P = ParamSpec('P')
R = TypeVar('R')


def handle_errors(func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except ProviderError as e:
            click.echo(click.style(str(e), fg="red"))
            if e.stderr:
                click.echo(e.stderr)
            sys.exit(1)
        except (ValueError, msgspec.MsgspecError) as e:
            click.echo(click.style(str(e), fg="red"))
            sys.exit(1)
        except RuntimeError:
            # Let RuntimeError bubble up to be handled by Click's CliRunner
            raise

    return wrapper
