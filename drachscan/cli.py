"""
Command-line interface for drachscan.

drachscan: DRACH motif flank extraction for RNA sequences
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import ScanConfig, write_config_template
from .exceptions import DrachScanError


def _setup_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """drachscan: DRACH motif flank extraction for RNA sequences."""
    pass


@cli.command()
@click.option('--src', '-s', 'src', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Input FASTA file with one or more RNA sequences')
@click.option('--out-dir', '-o', 'out_dir', type=click.Path(file_okay=False), required=True,
              help='Output directory (one <id>.fasta file per sequence)')
@click.option('--verbose/--compact', '-v', 'verbose', default=None,
              help='Annotate flanks with the motif and its position (default: compact)')
@click.option('--flank-length', '-l', type=click.IntRange(min=0), default=None,
              help='Bases reported on each side of a motif (default: 15)')
@click.option('--margin', type=click.IntRange(min=0), default=None,
              help='Margin around neighbouring motifs when masking them (default: 5)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file (command-line options take precedence)')
@click.option('--seed', type=int, default=None,
              help='Seed for the masking random generator')
@click.option('--summary/--no-summary', default=None,
              help='Write motif_summary.tsv (default: enabled)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def scan(src, out_dir, verbose, flank_length, margin, config_path, seed, summary, debug):
    """
    Extract the masked flanks of every DRACH motif.

    Each sequence of SRC gets an output file in OUT_DIR listing, for every
    motif, the bases before and after it. Other motifs reaching into a flank
    are replaced by random non-motif bases.

    \b
    Example:
      drachscan scan --src transcripts.fasta --out-dir flanks/ --verbose
    """
    from .pipeline import FlankPipeline

    _setup_logging(debug)

    try:
        config = ScanConfig.from_yaml(config_path) if config_path else ScanConfig()
        config = config.merge(
            input_path=Path(src),
            output_dir=Path(out_dir),
            verbose=verbose,
            flank_length=flank_length,
            mask_margin=margin,
            seed=seed,
            write_summary=summary,
        )
        results = FlankPipeline(config).run()
    except DrachScanError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"\nExtracted flanks for {len(results)} DRACH motif(s)")
    click.echo(f"Results written to: {config.output_dir}")


@cli.command()
@click.option('--src', '-s', 'src', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Input FASTA file')
def locate(src):
    """List DRACH motif occurrences as a tab-separated table (1-based positions)."""
    from .core.scanner import scan_record
    from .io.fasta import load_fasta

    try:
        records = load_fasta(src)
    except DrachScanError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("record_id\tindex\tstart\tend\tmotif")
    for record in records:
        for occurrence in scan_record(record).occurrences:
            click.echo(f"{record.id}\t{occurrence.index + 1}\t{occurrence.one_based_start}"
                       f"\t{occurrence.one_based_end}\t{occurrence.payload}")


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), default='drachscan_config.yaml',
              help='Output config file path')
def init(output):
    """Generate a template configuration file."""
    write_config_template(output)

    click.echo(f"Generated configuration template: {output}")
    click.echo("\nEdit this file and run:")
    click.echo(f"  drachscan scan --config {output} --src <fasta> --out-dir <dir>")


def main():
    cli()


if __name__ == '__main__':
    main()
