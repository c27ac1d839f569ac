import logging
from collections import namedtuple

import click


GlobalOptions = namedtuple('GlobalOptions', 'verbose')


@click.group()
@click.option('-v', '--verbose', is_flag=True)
@click.pass_context
def cli(ctx, verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = GlobalOptions(verbose)


@cli.command('check-html')
@click.argument('input', type=click.File(encoding='utf-8'))
@click.option('-a', '--allow', multiple=True, metavar='TAG',
              help='Allowed tag, can be repeated.')
@click.option('-c', '--config', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with allowed tags.')
@click.pass_context
def check_html(ctx, input, allow, config):
    """Check that HTML contains only allowed tags.

    Exits with status 1 when content is rejected. Without --allow options
    allowed tags are taken from configuration."""
    from .html import validate_html, collect_tags
    from .config import FileSystemLoader, get_default
    from .errors import Errors

    if allow:
        whitelist = frozenset(allow)
    elif config:
        whitelist = FileSystemLoader(config).load().allowed_tags
    else:
        whitelist = get_default().allowed_tags

    content = input.read()
    if validate_html(content, whitelist):
        click.echo('ok')
        return

    click.echo('rejected')
    if ctx.obj.verbose:
        errors = Errors()
        try:
            tags = collect_tags(content, errors)
        except Exception as e:
            click.echo('Failed to parse content: {}'.format(e), err=True)
        else:
            for tag in sorted(tags - whitelist):
                click.echo('disallowed tag: {}'.format(tag), err=True)
        for error in errors.list:
            click.echo('{}:{}: {}'.format(error.location.line,
                                          error.location.column,
                                          error.message), err=True)
    ctx.exit(1)


@cli.command('sniff')
@click.argument('input', type=click.File(mode='rb'))
def sniff(input):
    """Detect PDF and gzip content by its signature."""
    from .sniff import guess_type

    click.echo(guess_type(input.read()) or 'unknown')


@cli.command('color')
@click.option('--alpha', type=click.FloatRange(0, 1), default=1.0,
              show_default=True)
@click.option('--channel', type=click.Choice(['r', 'g', 'b']))
@click.option('--hex', 'hex_', is_flag=True, help='Print as #rrggbb.')
def color(alpha, channel, hex_):
    """Generate a random color."""
    from .color import random_rgba

    value = random_rgba(alpha, channel)
    click.echo(value.to_hex() if hex_ else str(value))


if __name__ == '__main__':
    cli.main(prog_name='python -m apphelpers')
