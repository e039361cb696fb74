"""
Command line interface
======================

Lists the symbols catalogued in the resolved SF Symbols font.
"""

import logging
import sys
from pathlib import Path

import click

from .core.config import ResolverConfig
from .core.exceptions import ConfigurationError
from .core.models import Family, FontDescriptor, GlyphSize, Variant, Weight
from .fonts.resolver import FontResolver


def _label_choice(enum_class) -> click.Choice:
    return click.Choice(enum_class.labels(), case_sensitive=False)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to resolver configuration YAML file",
)
@click.pass_context
def cli(ctx, verbose, config):
    """SF Symbols font toolkit."""
    try:
        resolver_config = ResolverConfig.from_env_and_yaml(yaml_path=config)
    except (ConfigurationError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    logging.basicConfig(
        level=logging.DEBUG if verbose else resolver_config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = resolver_config


def font_options(func):
    """Options describing which font to resolve."""
    options = [
        click.option(
            "--font",
            "-f",
            "font_path",
            type=click.Path(path_type=Path),
            help="Custom font file to read symbols from",
        ),
        click.option("--family", type=_label_choice(Family), default=Family.PRO.label),
        click.option("--variant", type=_label_choice(Variant), default=Variant.DISPLAY.label),
        click.option("--weight", type=_label_choice(Weight), default=Weight.REGULAR.label),
        click.option("--font-size", type=click.FloatRange(min=0, min_open=True), default=44.0),
        click.option("--glyph-size", type=_label_choice(GlyphSize), default=GlyphSize.MEDIUM.label),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve(config, font_path, family, variant, weight, font_size, glyph_size):
    descriptor = FontDescriptor(
        family=Family.from_label(family),
        variant=Variant.from_label(variant),
        weight=Weight.from_label(weight),
        font_size=font_size,
        glyph_size=GlyphSize.from_label(glyph_size),
    )
    font = FontResolver(config).resolve(font_path, descriptor)
    if font is None:
        click.echo(f"No font available for {descriptor}", err=True)
        sys.exit(1)
    return font


@cli.command(name="list")
@font_options
@click.argument("pattern", default="*")
@click.pass_obj
def list_glyphs(config, pattern, **font_args):
    """List symbol names matching PATTERN (shell-style, default all)."""
    font = _resolve(config, **font_args)
    try:
        for glyph in font.glyphs_matching(pattern):
            click.echo(glyph.full_name)
    finally:
        font.close()


@cli.command()
@font_options
@click.pass_obj
def info(config, **font_args):
    """Show which font was resolved."""
    font = _resolve(config, **font_args)
    try:
        click.echo(f"Source: {font.source or 'system'}")
        click.echo(f"Weight: {font.weight.label}")
        click.echo(f"Size:   {font.size:g}pt")
        click.echo(f"Glyphs: {len(font.glyphs)}")
    finally:
        font.close()


if __name__ == "__main__":
    cli()
