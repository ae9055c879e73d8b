"""`referenda-curves` command."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import jsonschema
import pydantic

from referenda_curves.config import PlotterConfig
from referenda_curves.core.domain.units import Time
from referenda_curves.pipeline import run
from referenda_curves.tracks import load_track_table

EXIT_TRACK_FAILED = 1
EXIT_INPUT_ERROR = 2


@click.command("referenda-curves")
@click.option(
    "--tracks",
    "tracks_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Track table JSON. Defaults to the bundled Moonbase tracks.",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("data"),
    show_default=True,
)
@click.option(
    "--unit",
    type=click.Choice([t.value for t in Time], case_sensitive=False),
    default=Time.HOUR.value,
    show_default=True,
    help="Time step of the sampled decision period.",
)
@click.option(
    "--keep-previous",
    is_flag=True,
    default=False,
    help="Keep previous points/ and plots/ contents. Other files in the output dir are never removed.",
)
@click.option("--csv/--no-csv", "write_csv", default=True, show_default=True)
@click.option("--plot/--no-plot", default=True, show_default=True)
@click.option("--comparison/--no-comparison", default=True, show_default=True)
@click.option("-v", "--verbose", is_flag=True, default=False)
def main(
    tracks_path: Path | None,
    output_dir: Path,
    unit: str,
    write_csv: bool,
    plot: bool,
    comparison: bool,
    keep_previous: bool,
    verbose: bool,
) -> None:
    """Sample approval/support curves of every track and export CSV points and charts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        table = load_track_table(tracks_path)
    except (json.JSONDecodeError, jsonschema.ValidationError, pydantic.ValidationError) as e:
        click.echo(f"Invalid track table: {e}", err=True)
        raise SystemExit(EXIT_INPUT_ERROR)

    config = PlotterConfig(
        output_dir=output_dir,
        unit=Time(unit.lower()),
        write_csv=write_csv,
        plot=plot,
        plot_comparison=comparison,
        overwrite_previous_data=not keep_previous,
    )
    report = run(table, config)

    built = len(report.approval_curves)
    click.echo(f"{table.network}: {built}/{len(table.tracks)} tracks written to {output_dir}")
    if not report.ok:
        for name, reason in report.failed_tracks.items():
            click.echo(f"  {name}: {reason}", err=True)
        for curve_type, reason in report.failed_comparisons.items():
            click.echo(f"  {curve_type.value}s comparison: {reason}", err=True)
        raise SystemExit(EXIT_TRACK_FAILED)


if __name__ == "__main__":
    main()
