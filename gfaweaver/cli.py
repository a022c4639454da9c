#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GFAWeaver.

This module provides the main CLI entry point and the subcommands for
validating, summarising and normalizing GFA v1 files.
"""

import json
import logging
import sys
import click
from pathlib import Path

from .version import __version__
from .config import ConfigParser, ConfigValidationError, reader_options, save_config_template, validate_config, load_config
from .config.schema import TEMPLATES
from .gfa.errors import GFAError
from .io_utils import gfa_stats, read_gfa, write_gfa

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _setup_logging(level: str):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger('gfaweaver').setLevel(getattr(logging, level.upper(), logging.INFO))


def _load_settings(ctx, config_file, integer_decoding, lenient):
    """Merge the config file with CLI overrides and return the settings dict."""
    parser = ConfigParser(config_file)
    parser.merge_cli_overrides({
        'records.integer_decoding': integer_decoding,
        'reader.strict': False if lenient else None,
    })
    parser.validate()

    settings = parser.to_dict()
    if not ctx.obj.get('VERBOSE') and not ctx.obj.get('QUIET'):
        _setup_logging(settings['logging']['level'])
    return settings


def _reader_flags(func):
    func = click.option('--lenient', is_flag=True,
                        help='Skip invalid lines with a warning instead of failing')(func)
    func = click.option('--integer-decoding', type=click.Choice(['decimal', 'char_code']),
                        default=None, help='How RC/FC/KC segment tags are decoded')(func)
    func = click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
                        help='YAML configuration file')(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    GFAWeaver: GFA v1 assembly graph validation and formatting

    Reads Graphical Fragment Assembly files, checks every header, segment
    and link record, and writes them back as canonical GFA lines.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    if verbose:
        _setup_logging('DEBUG')
    elif quiet:
        _setup_logging('ERROR')


# ============================================================================
# GFA Commands
# ============================================================================

@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
@_reader_flags
@click.pass_context
def validate(ctx, gfa_file, config_file, integer_decoding, lenient):
    """Validate a GFA file and report record counts."""
    try:
        settings = _load_settings(ctx, config_file, integer_decoding, lenient)
        graph = read_gfa(gfa_file, **reader_options(settings))
    except (GFAError, ConfigValidationError) as e:
        click.echo(f"✗ {gfa_file} is invalid: {e}", err=True)
        sys.exit(1)

    stats = gfa_stats(graph)
    click.echo(f"✓ {gfa_file} is valid")
    click.echo(f"  Version: {stats['version']}")
    click.echo(f"  Segments: {stats['segments']}")
    click.echo(f"  Links: {stats['links']}")
    click.echo(f"  Total length: {stats['total_length']:,} bp")


@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
@_reader_flags
@click.pass_context
def stats(ctx, gfa_file, config_file, integer_decoding, lenient):
    """Print GFA statistics as JSON."""
    try:
        settings = _load_settings(ctx, config_file, integer_decoding, lenient)
        graph = read_gfa(gfa_file, **reader_options(settings))
    except (GFAError, ConfigValidationError) as e:
        click.echo(f"✗ Error reading {gfa_file}: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(gfa_stats(graph), indent=2))


@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output GFA file (.gz to compress)')
@click.option('--compress', is_flag=True, help='Gzip the output file')
@_reader_flags
@click.pass_context
def normalize(ctx, gfa_file, output, compress, config_file, integer_decoding, lenient):
    """Rewrite a GFA file as canonical, validated GFA v1 lines."""
    try:
        settings = _load_settings(ctx, config_file, integer_decoding, lenient)
        graph = read_gfa(gfa_file, **reader_options(settings))
    except (GFAError, ConfigValidationError) as e:
        click.echo(f"✗ Error reading {gfa_file}: {e}", err=True)
        sys.exit(1)

    compress = compress or settings['writer']['compress']
    write_gfa(graph, Path(output), compress=compress)
    click.echo(f"✓ Wrote {len(graph.segments)} segments and {len(graph.links)} links to {output}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='gfaweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t', type=click.Choice(list(TEMPLATES)),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")
    save_config_template(Path(output), template=template)
    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        errors = validate_config(load_config(Path(config_file)))
    except ConfigValidationError as e:
        click.echo(f"\n✗ {e}", err=True)
        sys.exit(1)

    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


if __name__ == '__main__':
    sys.exit(main())
