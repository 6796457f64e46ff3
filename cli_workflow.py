#!/usr/bin/env python3
"""
CLI workflow runner for the Markdown-to-JSON pipeline.

Reads every markdown file below a source directory and writes either one
JSON file per document or a single consolidated tree.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import Settings
from core.constants import DEFAULT_SOURCE_PATTERN
from core.exceptions import MarkdownJSONError
from core.models import OutputMode
from mdjson import MarkdownJSONProcessor, RendererOptions
from serving.storage_service import DocumentStorageService

logger = logging.getLogger("mdjson")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route log records from every package to stderr."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    
    # to avoid duplicate handlers
    if root.hasHandlers():
        root.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    root.addHandler(console_handler)
    
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert markdown documents with YAML front matter to JSON'
    )
    parser.add_argument('source', type=str, help='Directory containing markdown files')
    parser.add_argument('out_dir', type=str, help='Directory to write JSON into')
    parser.add_argument('--pattern', type=str, default=DEFAULT_SOURCE_PATTERN, help='Glob for source files')
    parser.add_argument('--consolidate', action='store_true', default=None, help='Write a single nested JSON tree')
    parser.add_argument('--output-name', type=str, default=None, help='Filename of the consolidated tree')
    parser.add_argument('--smartypants', action='store_true', default=None, help='Typographic quotes and dashes')
    parser.add_argument('--strict-paths', action='store_true', default=None, help='Fail on duplicate tree keys')
    parser.add_argument('--indent', type=int, default=None, help='JSON indentation')
    parser.add_argument('--keep-going', action='store_true', help='Skip failing documents instead of aborting')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def _pick(flag, fallback):
    return fallback if flag is None else flag


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Run the conversion described by parsed CLI arguments."""
    config = settings.get_pipeline_config()
    renderer_options = settings.get_renderer_options()
    renderer_options['smartypants'] = _pick(args.smartypants, renderer_options['smartypants'])
    
    consolidate = _pick(args.consolidate, config['consolidate'])
    stop_on_error = False if args.keep_going else config['stop_on_error']
    
    storage = DocumentStorageService(args.source)
    try:
        documents = storage.load_documents(args.pattern)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 2
    
    processor = MarkdownJSONProcessor(
        options=RendererOptions.from_mapping(renderer_options),
        output_filename=args.output_name or config['output_filename'],
        strict_paths=_pick(args.strict_paths, config['strict_paths']),
        json_indent=_pick(args.indent, config['json_indent'])
    )
    mode = OutputMode.CONSOLIDATED if consolidate else OutputMode.PER_FILE
    
    logger.info(f"Converting {len(documents)} documents from {args.source} ({mode.value})")
    try:
        result = processor.process_batch(documents, mode, stop_on_error=stop_on_error)
    except MarkdownJSONError as e:
        logger.error(f"Aborted: {e}")
        return 1
    
    written = storage.write_outputs(result.outputs, args.out_dir)
    logger.info(f"Wrote {len(written)} files to {args.out_dir}")
    
    for failure in result.errors:
        logger.error(f"{failure.path}: {failure.error}")
    
    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return run(args, Settings())


if __name__ == '__main__':
    sys.exit(main())
