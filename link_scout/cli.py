# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the LinkScout broken link checker.

Commands:
  check     Check the links/images of a page or of all pages of a sitemap
  config    Print the effective configuration

Common options:
  --config PATH       YAML/JSON configuration file (optional)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if not given)
  --log-format FORMAT Logging format string

check options:
  --url, -u URL              Page or sitemap to start from
  --find-broken-links, -l    Check <a href> references
  --find-broken-images, -c   Check <img src> references
  --is-xml-sitemap, -i       Treat the URL as a sitemap
  --json PATH / --html PATH  Save a report file after the run

Example:
  link_scout check -u https://example.com/sitemap.xml -i -l --json links.json
"""
import sys
import asyncio
from pathlib import Path

import click

from link_scout import __version__
from link_scout.aggregator import aggregate_results
from link_scout.config import load_config
from link_scout.logger import init_logging
from link_scout.engine import start_check
from link_scout.report.json_report import render_json
from link_scout.report.html_report import render_html
from link_scout.report.stream import ReportSink

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-V', message='LinkScout, version %(version)s')
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if not given)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """LinkScout: find broken links and images on a page or a sitemap."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Page or sitemap URL to check.')
@click.option('--find-broken-links', '-l', 'links', is_flag=True, help='Find broken links in the page(s).')
@click.option('--find-broken-images', '-c', 'images', is_flag=True, help='Find broken images in the page(s).')
@click.option('--is-xml-sitemap', '-i', 'is_xml_sitemap', is_flag=True, help='The URL is an XML sitemap.')
@click.option('--exact-host', 'exact_host', is_flag=True, help='Follow sitemap entries only on the exact same host.')
@click.option('--accept-2xx', 'accept_2xx', is_flag=True, help='Count any 2xx status as OK.')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option('--timeout', 'timeout', type=float, default=None, help='Per-request timeout (seconds).')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory containing report.html.j2 (bundled template by default)'
)
@click.option('--pretty/--compact', default=True, show_default=True, help='Indent the JSON report')
@click.pass_context
def check(ctx, url, links, images, is_xml_sitemap, exact_host, accept_2xx,
          user_agent, timeout, json_output, html_output, template_dir, pretty):
    """Check every link/image reference and print one line per URL."""
    # flags only switch features on, never off what the config file enabled
    overrides = {
        'url': url,
        'find_broken_links': True if links else None,
        'find_broken_images': True if images else None,
        'is_xml_sitemap': True if is_xml_sitemap else None,
        'exact_host_match': True if exact_host else None,
        'accept_2xx': True if accept_2xx else None,
        'user_agent': user_agent,
        'timeout': timeout,
    }
    try:
        cfg = load_config(ctx.obj['config_path'], overrides)
    except Exception as e:
        print_error(f'Invalid configuration: {e}')

    try:
        results = asyncio.run(start_check(cfg, ReportSink()))
    except Exception as e:
        print_error(f'Error: {e}')

    if not json_output and not html_output:
        return

    report = aggregate_results(results, root_url=str(cfg.url))
    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Error saving JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Error saving HTML report: {e}')

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Override the URL from the config file.')
@click.pass_context
def show_config(ctx, url):
    """Print the effective configuration as JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'], {'url': url})
    except Exception as e:
        print_error(f'Invalid configuration: {e}')
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
