"""Main entry point for the HTTP to curl converter."""

import argparse
import logging
import sys
from typing import List, Optional
from msg2curl.config import get_settings
from msg2curl.utils import setup_logging
from msg2curl.errors import Msg2CurlError
from msg2curl.extraction import BlockExtractor
from msg2curl.parsers import HTTPClassifier
from msg2curl.renderers import CurlRenderer
from msg2curl.server import create_app, run_server

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = '---'


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = argparse.ArgumentParser(
        description="Convert raw HTTP messages into curl commands"
    )
    parser.add_argument(
        '--mode',
        choices=['curl', 'body', 'server'],
        default='curl',
        help='Operation mode: curl (print command), body (print request/response body), server (run Flask server)',
    )
    parser.add_argument(
        '--file', type=str, help='Input file (defaults to stdin)'
    )
    parser.add_argument(
        '--kind',
        choices=['request', 'response'],
        default='request',
        help='Which body to print in body mode',
    )

    args = parser.parse_args(argv)

    # Load settings
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.debug(f"Running in {args.mode} mode")

    try:
        if args.mode == 'curl':
            return run_curl_mode(args.file, settings)
        elif args.mode == 'body':
            return run_body_mode(args.file, args.kind, settings)
        elif args.mode == 'server':
            return run_server_mode(settings)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1
    return 0


def read_input(file_path: Optional[str]) -> str:
    """Read text from a file, or stdin when no file is given."""
    if not file_path:
        return sys.stdin.read()
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def split_blocks(text: str) -> List[str]:
    """Split text into blocks separated by lines containing only '---'."""
    blocks = []
    current: List[str] = []
    for line in text.split('\n'):
        if line.strip() == BLOCK_SEPARATOR:
            blocks.append('\n'.join(current))
            current = []
        else:
            current.append(line)
    blocks.append('\n'.join(current))
    return [block for block in blocks if block.strip()]


def run_curl_mode(file_path: Optional[str], settings) -> int:
    """Print the curl command for a raw HTTP request."""
    renderer = CurlRenderer(scheme=settings.url_scheme)
    try:
        command = renderer.http_to_curl(read_input(file_path))
    except Msg2CurlError as e:
        logger.error(f"Could not build command: {e}")
        return 1

    print(command)
    return 0


def run_body_mode(file_path: Optional[str], kind: str, settings) -> int:
    """Print the request or response body found in a file of blocks."""
    classifier = HTTPClassifier.from_yaml(settings.rules_file_path)
    extractor = BlockExtractor(classifier)
    blocks = split_blocks(read_input(file_path))
    logger.debug(f"Read {len(blocks)} blocks")

    if kind == 'response':
        body = extractor.response_body(blocks)
    else:
        body = extractor.request_body(blocks)

    if not body:
        logger.error(f"No {kind} body found")
        return 1

    print(body)
    return 0


def run_server_mode(settings) -> int:
    """Run Flask server exposing the converter."""
    logger.info(
        f"Starting server on {settings.server_host}:{settings.server_port}"
    )
    app = create_app(settings)
    run_server(app, settings)
    return 0


if __name__ == '__main__':
    sys.exit(main())
