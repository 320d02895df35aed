"""CLI interface for tiffentries -- entries and info subcommands."""

import json
import sys
from pathlib import Path

import click

import tiffentries
from tiffentries.assembly import collect_entries
from tiffentries.constants import (
    EncoderCompression,
    EncodingMode,
    PhotometricInterpretation,
    PixelResolutionUnit,
)
from tiffentries.loader import load_image
from tiffentries.log import (
    cli_dim,
    cli_error,
    cli_header,
    cli_part,
    cli_separator,
    cli_success,
    cli_warning,
    format_entry_line,
    format_value,
    log_error,
    log_info,
)
from tiffentries.models import ImageFormatConfig, parse_enum_value
from tiffentries.processors import preservation_skip_reason
from tiffentries.tiff.tags import classify_tag


def _names(enum_cls):
    return [m.name.lower() for m in enum_cls]


def _fail(msg):
    click.echo(cli_error(f'Error: {msg}'), err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=tiffentries.__version__, prog_name='tiffentries')
def main():
    """tiffentries -- TIFF encoder tag-entry assembly.

    Shows which directory entries an encoder would write for an image,
    given the pixel-format settings and whether metadata is preserved.
    """
    pass


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='Encoder settings as JSON.')
@click.option('--photometric', type=click.Choice(_names(PhotometricInterpretation),
                                                 case_sensitive=False),
              help='Photometric interpretation to encode with.')
@click.option('--mode', type=click.Choice(_names(EncodingMode), case_sensitive=False),
              help='Encoding mode.')
@click.option('--compression', type=click.Choice(_names(EncoderCompression),
                                                 case_sensitive=False),
              help='Requested compression.')
@click.option('--predictor/--no-predictor', default=None,
              help='Use the horizontal predictor.')
@click.option('--preserve-metadata', is_flag=True,
              help='Carry descriptive tags over from the source file.')
@click.option('--resolution-units', type=click.Choice(_names(PixelResolutionUnit),
                                                      case_sensitive=False),
              help='Override the resolution units of the image.')
@click.option('--json-out', type=click.Path(), help='Write entries as JSON to file.')
@click.option('--log', type=click.Path(), help='Write log to file.')
def entries(path, config_path, photometric, mode, compression, predictor,
            preserve_metadata, resolution_units, json_out, log):
    """List the entries an encoder would write for PATH."""
    filepath = Path(path)
    log_file = None

    def log_msg(line):
        if log_file:
            log_file.write(line + '\n')
            log_file.flush()

    try:
        try:
            if log:
                log_file = open(log, 'w')
            image = load_image(filepath)
            config = (ImageFormatConfig.from_json(config_path) if config_path
                      else ImageFormatConfig.default())
        except (OSError, ValueError) as e:
            log_msg(log_error(str(e)))
            _fail(e)

        if photometric:
            config.photometric_interpretation = parse_enum_value(
                PhotometricInterpretation, photometric, 'photometric')
        if mode:
            config.encoding_mode = parse_enum_value(EncodingMode, mode, 'mode')
        if compression:
            config.compression = parse_enum_value(
                EncoderCompression, compression, 'compression')
        if predictor is not None:
            config.use_horizontal_predictor = predictor
        if resolution_units:
            image.metadata.resolution_units = parse_enum_value(
                PixelResolutionUnit, resolution_units, 'resolution units')

        collector = collect_entries(image, config, preserve_metadata)
        collected = collector.snapshot()

        click.echo(cli_header(f'{filepath.name}: {image.width}x{image.height}, '
                              f'{len(collected)} entries'))
        click.echo(cli_dim(json.dumps(config.to_dict())))
        click.echo(cli_separator())
        for entry in collected:
            click.echo(format_entry_line(entry))
        log_msg(log_info(f'{filepath}: {len(collected)} entries collected'))

        if json_out:
            try:
                with open(json_out, 'w') as f:
                    json.dump([e.to_dict() for e in collected], f, indent=2)
            except OSError as e:
                log_msg(log_error(str(e)))
                _fail(e)
            click.echo(cli_success(f'Entries written to {json_out}'))
    finally:
        if log_file:
            log_file.close()


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def info(path):
    """Show image properties and how each tag of PATH is classified."""
    filepath = Path(path)
    try:
        image = load_image(filepath)
    except (OSError, ValueError) as e:
        _fail(e)

    tiff_meta = image.tiff_metadata
    frame = image.frame_metadata
    click.echo(cli_header(f'File: {filepath.name}'))
    click.echo(f'Size: {image.width}x{image.height}')
    click.echo(f'Byte order: {tiff_meta.byte_order.name}')
    click.echo(f'Bits per pixel: {int(tiff_meta.bits_per_pixel)}')
    click.echo(f'Compression: {getattr(tiff_meta.compression, "name", tiff_meta.compression)}')
    click.echo(f'Resolution: {format_value(frame.horizontal_resolution)} x '
               f'{format_value(frame.vertical_resolution)} '
               f'({frame.resolution_unit.name})')
    if tiff_meta.xmp_profile:
        click.echo(f'XMP: {len(tiff_meta.xmp_profile)} bytes')

    click.echo(cli_separator())
    for entry in frame.frame_tags:
        reason = preservation_skip_reason(entry)
        status = cli_success('preserved') if reason is None else cli_warning(f'dropped ({reason})')
        click.echo(f'{entry.tag:>6} {entry.name:<26} {cli_part(classify_tag(entry.tag)):<6} {status}')


if __name__ == '__main__':
    main()
