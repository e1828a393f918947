#!/usr/bin/env python3
"""
CLI for the Process Anti-Pattern Detector

Usage: antipattern queries [ID...]
       antipattern translate <template.yaml> [--json]
       antipattern detect <ID...> [--template FILE] [--config FILE]
       antipattern benchmark [--config FILE]
"""

import sys
import json
import logging
import click
from typing import List, Optional

from antipattern import __version__, setup_logging
from antipattern.errors import AntiPatternError
from antipattern.catalogue import AntiPatternId, get_anti_pattern, list_anti_patterns
from antipattern.graph import load_templates
from antipattern.query import build_queries
from antipattern.detection import AntiPatternDetector
from antipattern.benchmark import BENCHMARKS, BenchmarkRunner, format_summary
from .config import load_config
from neo4j_client.client import Neo4jClient

logger = logging.getLogger(__name__)

CATALOGUE_IDS = [member.value for member in AntiPatternId]


def _configure_logging(verbose: bool, config: Optional[dict] = None, default_level: str = 'WARNING'):
    """Setup logging from the verbose flag and the logging config section."""
    logging_config = (config or {}).get('logging', {})
    level = 'DEBUG' if verbose else (logging_config.get('level') or default_level)
    setup_logging(level, logging_config.get('file'))


def format_queries(title: str, queries: List[str]) -> str:
    """Render the queries of one template for display."""
    divider = "-" * len(title)
    lines = [title, divider]
    if len(queries) > 1:
        lines.append("> First query (existence of target nodes)\n")
        lines.append(queries[0])
        lines.append("\n> Second query (existence of anti-pattern)\n")
    lines.append(queries[-1])
    lines.append(divider)
    return "\n".join(lines) + "\n"


@click.command()
@click.argument('ids', nargs=-1, type=click.Choice(CATALOGUE_IDS))
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def queries(ids, verbose):
    """
    Print the Cypher queries of catalogued anti-patterns.

    IDS: Catalogue ids (default: all)
    """
    _configure_logging(verbose)

    anti_patterns = [get_anti_pattern(i) for i in ids] if ids else list_anti_patterns()
    for anti_pattern in anti_patterns:
        click.echo(format_queries(anti_pattern.name, build_queries(anti_pattern.template)))


@click.command()
@click.argument('template_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--json', 'json_output', is_flag=True, help='Output queries as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def translate(template_file, json_output, verbose):
    """
    Print the Cypher queries of templates defined in a YAML file.

    TEMPLATE_FILE: YAML template definition
    """
    _configure_logging(verbose)

    try:
        templates = load_templates(template_file)
    except AntiPatternError as e:
        click.echo(f"❌ Invalid template: {e}", err=True)
        sys.exit(1)

    if json_output:
        output = [
            {"name": template.name, "queries": build_queries(template)}
            for template in templates
        ]
        click.echo(json.dumps(output if len(output) > 1 else output[0]["queries"], indent=2))
        return

    for index, template in enumerate(templates):
        title = template.name or f"Template {index + 1}"
        click.echo(format_queries(title, build_queries(template)))


@click.command()
@click.argument('ids', nargs=-1, type=click.Choice(CATALOGUE_IDS))
@click.option('--template', 'template_files', multiple=True, type=click.Path(exists=True, dir_okay=False),
              help='Additional YAML template file')
@click.option('--config', type=click.Path(exists=True),
              help='Custom config file (default: config/detector_config.yaml)')
@click.option('--json', 'json_output', is_flag=True, help='Output results as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def detect(ids, template_files, config, json_output, verbose):
    """
    Detect anti-patterns in the process graph stored in Neo4j.

    IDS: Catalogue ids to check
    """
    try:
        detector_config = load_config(config)
        _configure_logging(verbose, detector_config, default_level='INFO')

        checks = [(get_anti_pattern(i).name, get_anti_pattern(i).template) for i in ids]
        for template_file in template_files:
            for template in load_templates(template_file):
                checks.append((template.name or template_file, template))

        if not checks:
            click.echo("❌ Nothing to detect: pass catalogue ids or --template files")
            sys.exit(1)

        results = []
        with Neo4jClient.from_config(detector_config) as client:
            detector = AntiPatternDetector(client)
            for name, template in checks:
                results.append(detector.detect(template, name=name))

        if json_output:
            click.echo(json.dumps([result.to_dict() for result in results], indent=2))
            return

        for result in results:
            marker = "⚠️ " if result.detected else "✅"
            click.echo(f"{marker} {result.template_name}: "
                       f"{'detected' if result.detected else 'not detected'} "
                       f"({result.total_time_ms:.0f}ms)")

    except AntiPatternError as e:
        logger.error(f"Detection failed: {e}")
        click.echo(f"❌ Detection failed: {e}")
        sys.exit(1)


@click.command()
@click.option('--config', type=click.Path(exists=True),
              help='Custom config file (default: config/detector_config.yaml)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def benchmark(config, verbose):
    """Run the detection benchmark on the example process graphs."""
    try:
        detector_config = load_config(config)
        _configure_logging(verbose, detector_config)

        with Neo4jClient.from_config(detector_config) as client:
            outcomes = BenchmarkRunner(client, detector_config).run(BENCHMARKS)

        process_name = None
        for outcome in outcomes:
            if outcome.process_name != process_name:
                process_name = outcome.process_name
                click.echo("\n" + "-" * 50)
                click.echo(f"Process graph \"{process_name}\"")
            click.echo(f"\n>>> Anti-Pattern \"{outcome.anti_pattern_name}\"")
            click.echo(format_summary(outcome))

        incorrect = [outcome for outcome in outcomes if not outcome.correct]
        click.echo("\n" + "=" * 50)
        click.echo(f"📊 {len(outcomes) - len(incorrect)}/{len(outcomes)} detections correct")
        click.echo("=" * 50)

        if incorrect:
            sys.exit(1)

    except AntiPatternError as e:
        logger.error(f"Benchmark failed: {e}")
        click.echo(f"❌ Benchmark failed: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name='Process Anti-Pattern Detector')
def cli():
    """Process Anti-Pattern Detector - compile and run anti-pattern queries."""
    pass


# Register commands
cli.add_command(queries)
cli.add_command(translate)
cli.add_command(detect)
cli.add_command(benchmark)


def main():
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        click.echo(f"❌ Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
