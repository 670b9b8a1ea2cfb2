"""
Command-line interface for site_percolation.

Commands:
    percolation selftest                         - Run the built-in self-check suite
    percolation run --config scenarios.yaml      - Replay scenarios from a YAML file
    percolation grid --size 3 --open 1,1 ...     - Open sites on a fresh grid and report its state
"""

import click

from .. import __version__


def _parse_site(ctx, param, values):
    """Parse repeated 'ROW,COL' option values into (row, col) tuples."""
    sites = []
    for value in values:
        try:
            row, col = (int(part) for part in value.split(','))
        except ValueError:
            raise click.BadParameter(f"'{value}' is not of the form ROW,COL")
        sites.append((row, col))
    return sites


def _report_results(results) -> int:
    """Echo one line per result and return the number of failed results."""
    n_failed = 0
    for result in results:
        if result.passed:
            suffix = f" (raised {result.error})" if result.error else ""
            click.echo(f"✓ {result.name}{suffix}")
        else:
            n_failed += 1
            click.echo(f"✗ {result.name}")
            for failure in result.failures:
                click.echo(f"    {failure}")

    click.echo(f"\n{len(results) - n_failed}/{len(results)} passed")
    return n_failed


@click.group()
@click.version_option(version=__version__)
def cli():
    """Site Percolation - union-find percolation on N-by-N grids."""
    pass


@cli.command('selftest')
@click.pass_context
def selftest(ctx):
    """Run the built-in self-check suite."""
    from ..run import run_builtin_checks

    click.echo("Running tests...")
    n_failed = _report_results(run_builtin_checks())
    if n_failed:
        ctx.exit(1)


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Scenario YAML file')
@click.option('--name', '-n', 'names', multiple=True,
              help='Only run the named scenario (repeatable)')
@click.pass_context
def run(ctx, config_path, names):
    """Replay scenarios from a YAML file against fresh grids."""
    from ..run import ScenarioConfig, run_scenarios

    try:
        config = ScenarioConfig.from_yaml(config_path)
        scenarios = [config.get(name) for name in names] if names else config.scenarios
    except (ValueError, KeyError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)

    if config.description:
        click.echo(config.description)
    click.echo(f"Running {len(scenarios)} scenarios from {config_path}")

    n_failed = _report_results(run_scenarios(scenarios))
    if n_failed:
        ctx.exit(1)


@cli.command('grid')
@click.option('--size', '-s', required=True, type=int, help='Number of rows and columns')
@click.option('--open', '-o', 'sites', multiple=True, callback=_parse_site,
              help='Site to open as ROW,COL (1-based, repeatable)')
@click.pass_context
def grid(ctx, size, sites):
    """Open sites on a fresh grid and report whether it percolates."""
    from ..percolation import PercolationGrid, PercolationError

    try:
        g = PercolationGrid(size)
        for row, col in sites:
            g.open(row, col)
    except PercolationError as e:
        click.echo(f"Error ({type(e).__name__}): {e}", err=True)
        ctx.exit(1)

    full = [(row, col)
            for row in range(1, size + 1)
            for col in range(1, size + 1)
            if g.is_full(row, col)]

    click.echo(f"Grid {size}x{size}: {g.number_of_open_sites()} open sites")
    click.echo(f"Full sites: {', '.join(f'({r},{c})' for r, c in full) if full else 'none'}")
    click.echo(f"Percolates: {'yes' if g.percolates() else 'no'}")


if __name__ == '__main__':
    cli()
