import sys

import click
import django
from django.conf import settings as django_settings
from django.core import management
from django.core.management.base import CommandError

from . import __version__


def setup(config):
    """Configure django from the YAML file, unless it already is."""

    if not django_settings.configured:
        from clubdata.conf.serversettings import configure
        configure(config)

    django.setup()


def run(name, **options):
    try:
        management.call_command(name, **options)

    except CommandError as e:
        click.echo(f'Error: {e}')
        sys.exit(1)


# click entrypoint
@click.group()
@click.version_option(__version__)
@click.option('--config', default='settings.yml', show_default=True, help='YAML server configuration file.')
@click.pass_context
def main(ctx, config):

    """Club data CLI"""

    ctx.obj = config


@main.command()
@click.pass_obj
def init(config):

    """Create or upgrade the database tables."""

    setup(config)
    run('migrate', interactive=False)


@main.command()
@click.argument('field', required=False)
@click.pass_obj
def show(config, field):

    """Print the club data record, or a single FIELD of it."""

    setup(config)
    run('clubdata', field=field)


@main.command()
@click.pass_obj
def render(config):

    """Print the public club data fragment."""

    setup(config)
    run('clubdata', render=True)


@main.command(name='set')
@click.option('--phone', help='Phone number.')
@click.option('--email', help='Email address.')
@click.option('--address', help='Address, may span several lines.')
@click.pass_obj
def set_record(config, phone, email, address):

    """Replace the club data record. Fields which are not given are cleared."""

    setup(config)
    run('clubdata', set=True, phone=phone, email=email, address=address)


@main.command()
@click.confirmation_option(prompt='Delete the club data record?')
@click.pass_obj
def delete(config):

    """Delete the club data record."""

    setup(config)
    run('clubdata', delete=True)
