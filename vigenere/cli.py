"""Command line interface for the Vigenere cipher."""

import json
import os
import sys

import click

from . import __version__
from .cipher_api import CipherRequest, InvalidKey, Mode, UsageError, VigenereError, serialize_result
from .engine import Engine

try:
    import yaml  # optional dependency for YAML config files
except Exception:
    yaml = None


def _print_help(ctx, param, value):
    """Write the full help text to stderr and exit with a failure status."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _load_config(config_path):
    """Load a YAML or JSON config file and return its mapping (empty if none)."""
    if not config_path:
        return {}
    _, ext = os.path.splitext(config_path.lower())
    try:
        with open(config_path, 'r', encoding='utf-8') as cf:
            if ext in ('.yaml', '.yml'):
                if yaml is None:
                    raise click.BadParameter(
                        "PyYAML is required to load YAML config files; install 'pyyaml' or use JSON",
                        param_hint="'--config'",
                    )
                conf = yaml.safe_load(cf) or {}
            else:
                # assume JSON
                conf = json.load(cf) or {}
    except (OSError, ValueError) as e:
        raise click.BadParameter(f"cannot read config file: {e}", param_hint="'--config'")
    if not isinstance(conf, dict):
        raise click.BadParameter("config file must contain a mapping", param_hint="'--config'")
    return conf


class MessageFirstCommand(click.Command):
    """Command that also accepts a leading message starting with '-'.

    When the first argument looks like an option but names none of this
    command's options (e.g. "-Hello" or "-5 degrees"), it is the message.
    It is moved behind a `--` separator so the remaining flags still parse.
    """

    def parse_args(self, ctx, args):
        if args and args[0].startswith('-') and args[0] != '--':
            names = set()
            for param in self.get_params(ctx):
                if isinstance(param, click.Option):
                    names.update(param.opts)
                    names.update(param.secondary_opts)
            token = args[0].split('=', 1)[0]
            if token not in names and '--' not in args[1:]:
                args = list(args[1:]) + ['--', args[0]]
        return super().parse_args(ctx, args)


@click.command(cls=MessageFirstCommand, context_settings={'help_option_names': []})
@click.argument('message', required=False)
@click.option('-m', '--mode', 'mode', type=str, default=None,
              help='0 = encrypt (default), 1 = decrypt')
@click.option('-k', '--key', 'key', type=str, default=None,
              help='Keyword to use (variable length, ASCII-only)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False), default=None,
              help='Path to YAML or JSON configuration file providing defaults for mode, key and log_level')
@click.option('--log-level', 'log_level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level for diagnostics written to stderr (default WARNING)')
@click.option('--log-path', 'log_path', type=click.Path(dir_okay=False), default=None,
              help='Also write JSONL log records to this file')
@click.option('--json', 'as_json', is_flag=True, default=False,
              help='Print the result (mode, message, keystream, output) as JSON')
@click.version_option(version=__version__, prog_name='vigenere')
@click.option('-h', '--help', is_flag=True, expose_value=False, is_eager=True, callback=_print_help,
              help='Display this help message and usage information.')
def cli(message, mode, key, config_path, log_level, log_path, as_json):
    """Encrypt or decrypt MESSAGE (A-Z, a-z) with the Vigenere cipher.

    Non-alphabetic characters are passed through unchanged and do not
    consume key letters. Letter case is preserved.

    A message starting with '-' may be given first, as in
    `vigenere "-Hello" -m 0 -k KEY`, or anywhere after a `--` separator.
    """
    file_conf = _load_config(config_path)

    # CLI flags take precedence over config file values
    if mode is None:
        mode = file_conf.get('mode', 0)
    if key is None:
        key = file_conf.get('key')
    if log_level is None:
        log_level = file_conf.get('log_level', 'WARNING')

    if not message:
        raise click.UsageError("Missing argument 'MESSAGE'.")
    if key is None:
        raise click.UsageError("Missing option '-k' / '--key'.")

    try:
        selected = Mode.from_flag(mode)
    except UsageError as e:
        raise click.BadParameter(str(e), param_hint="'-m' / '--mode'")

    engine = Engine()
    engine.configure_logging(log_level=log_level, log_path=log_path, stream=sys.stderr)
    try:
        try:
            request = CipherRequest(message=message, key=str(key), mode=selected)
        except InvalidKey as e:
            raise click.BadParameter(str(e), param_hint="'-k' / '--key'")

        try:
            result = engine.run(request)
        except VigenereError as e:
            click.echo(f"Error: {e}", err=True)
            raise click.Abort()

        if as_json:
            click.echo(json.dumps(serialize_result(result), indent=2))
        else:
            click.echo(result.output)
    finally:
        engine.close()


def main():
    cli(prog_name='vigenere')


if __name__ == '__main__':
    main()
