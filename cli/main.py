"""
Main entry point for the filehash CLI.
- Loads configuration and sets up logging.
- Scans the raw arguments for ``-alg <algorithm> <filePath>``.
- Prints the digest (or a message) and maps failures to exit code 1.
"""
import configparser
import logging
import os
import sys
import click
import rich_click as rclick
from utils.filehash_config import DEFAULT_CONFIG_PATH, active_env_overrides, load_configuration, get_config_value
from utils.logging_config import setup_logging
from utils.alg_args import ALG_FLAG, InvalidArgumentsError, parse_alg_args
from services.hashing_service import DEFAULT_CHUNK_SIZE, FileReadError, HashingService

logger = logging.getLogger(__name__)


class AlgScanCommand(rclick.RichCommand):
    """
    Command whose options (``--help`` included) are only parsed before the first ``-alg``.

    Everything from ``-alg`` on is handed to the ``argv`` argument untouched, so a
    file may be named ``--help`` or ``--verbose``.
    """

    def parse_args(self, ctx: click.Context, args: list) -> list:
        args = list(args)
        if ALG_FLAG in args:
            index = args.index(ALG_FLAG)
            args = args[:index] + ['--'] + args[index:]
        return super().parse_args(ctx, args)


# Only long options are declared: a short flag such as -l would swallow the
# tail of "-alg" when click splits unknown single-dash tokens.
@rclick.command(cls=AlgScanCommand, context_settings={"ignore_unknown_options": True})
@click.option('--verbose', count=True, help="Set verbosity level (--verbose = INFO, --verbose --verbose = DEBUG)")
@click.option('--logfile', type=click.Path(dir_okay=False, writable=True), help="Log to file")
@click.option('--config', type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_PATH, show_default=True, help="Path to config file")
@click.argument('argv', nargs=-1, type=click.UNPROCESSED)
def filehash_cli(verbose: int, logfile: str, config: str, argv: tuple) -> None:
    """
    Print the digest of a file: filehash -alg <sha256|blake3|autov2|crc32> <filePath>

    Options must come before -alg. Any tokens other than -alg and its two
    values are ignored.

    Args:
        verbose (int): Verbosity level (1 = INFO, 2+ = DEBUG); overrides [logging] verbosity.
        logfile (str): Path to log file; overrides [logging] logfile.
        config (str): Path to configuration file. A missing file means defaults.
        argv (tuple): Remaining raw command-line tokens.

    Returns:
        None
    """
    try:
        cfg = load_configuration(config)
        verbosity = verbose if verbose else get_config_value(cfg, 'logging', 'verbosity', fallback=0, value_type=int)
        log_path = logfile or get_config_value(cfg, 'logging', 'logfile')
        setup_logging(verbosity=verbosity, logfile=log_path)
    except (ValueError, OSError, configparser.Error) as e:
        click.secho(f"❌ Configuration error: {e}", fg="red", err=True)
        sys.exit(1)

    if os.path.isfile(config):
        logger.debug(f"Loaded configuration from: {config}")
    else:
        logger.debug(f"No configuration file at {config}, using defaults")
    for env_var in active_env_overrides():
        logger.debug(f"Applied environment override: {env_var}")

    hashing_service = HashingService(chunk_size=DEFAULT_CHUNK_SIZE)

    try:
        invocation = parse_alg_args(argv)
        logger.debug(f"Parsed invocation: {invocation}")
        result = hashing_service.digest(invocation.algorithm, invocation.file_path)
    except InvalidArgumentsError as e:
        logger.error(f"Invalid arguments: {e}")
        click.secho(f"❌ Error: {e}", fg="red", err=True)
        click.secho("💡 Usage: filehash -alg <algorithm> <filePath>", fg="yellow", err=True)
        sys.exit(1)
    except FileReadError as e:
        logger.error(f"Hashing failed: {e}")
        click.secho(f"❌ Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(result)


if __name__ == '__main__':
    filehash_cli()
