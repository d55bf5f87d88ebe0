#!/usr/bin/env python3
"""
Generate the static web UI for the Maple ranking dashboard.
Creates an HTML/CSS/JS page that can be uploaded to GitHub Pages.

Modules:
- data_processing.py: fetching sources and building the view model
- templates/: HTML, CSS, and JavaScript template modules
- file_generator.py: orchestration and file generation
"""

import argparse
import logging
import sys
from pathlib import Path

from .file_generator import generate_complete_web_ui
from ..utils.sync_ranking import CONFIG_FILE, available_sources, load_config, resolve_source


def main():
    """Main entry point for web UI generation."""
    parser = argparse.ArgumentParser(description='Generate static web UI for the Maple ranking dashboard')
    parser.add_argument('--source', nargs='+', dest='sources',
                        help='Ranking sources to include (default: every available source)')
    parser.add_argument('-o', '--output', help='Output directory for web UI (default from config)')
    parser.add_argument('--config', default=CONFIG_FILE, help='Configuration file')
    parser.add_argument('--name', default='', help='Character to preselect in the generated page')
    parser.add_argument('--max-workers', type=int, default=4, help='Max workers for concurrent fetching')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    config = load_config(args.config)
    output_dir = Path(args.output or config["web_ui_output"])

    if args.sources:
        sources = []
        for source in args.sources:
            resolved = resolve_source(source)
            if resolved not in sources:
                sources.append(resolved)
    else:
        default = resolve_source(config["default_source"])
        sources = [default] + [item["value"] for item in available_sources() if item["value"] != default]

    print(f"Generating web UI for sources: {', '.join(sources)}")
    data = generate_complete_web_ui(
        sources=sources,
        output_dir=output_dir,
        config=config,
        selected_name=args.name,
        max_workers=args.max_workers,
    )

    print(f"\n✅ Web UI generation complete!")
    print(f"📁 Output directory: {output_dir.absolute()}")
    print(f"🌐 Open {output_dir / 'index.html'} in your browser to view")

    failed = [source for source, source_data in data["data"].items() if not source_data["has_data"]]
    for source in failed:
        print(f"⚠️  No data for {source}")
    return 1 if len(failed) == len(sources) else 0


if __name__ == '__main__':
    sys.exit(main())
