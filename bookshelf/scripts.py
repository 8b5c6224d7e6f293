"""Print the book as JSON, or serve it over HTTP."""
import argparse
import logging

import uvicorn
from clean_python import BadRequest
from pydantic import ValidationError

from bookshelf.composition import create_app
from bookshelf.composition import create_book_controller
from bookshelf.config import AppConfig

logger = logging.getLogger(__name__)


def get_parser():
    """Return argument parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        default=False,
        help="Verbose output",
    )
    subparsers = parser.add_subparsers(dest="command")
    serve = subparsers.add_parser("serve", help="Serve the book over HTTP")
    serve.add_argument("--host", help="Interface to bind to")
    serve.add_argument("--port", type=int, help="Port to bind to")
    return parser


def print_book() -> None:
    book = create_book_controller().get_book()
    print(book.model_dump_json())


def serve(config: AppConfig) -> None:
    logger.info("serving on %s:%s", config.host, config.port)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


def load_config() -> AppConfig:
    try:
        return AppConfig()
    except ValidationError as e:
        raise BadRequest(e)


def main(argv=None):
    """Call main command with args from parser.

    This method is called when you run 'bookshelf', this is configured as
    a console script in 'pyproject.toml'.
    """
    options = get_parser().parse_args(argv)
    try:
        config = load_config()
        if options.verbose:
            config = config.model_copy(update={"log_level": "DEBUG"})
        logging.basicConfig(
            level=config.log_level.upper(), format="%(levelname)s: %(message)s"
        )
        if options.command == "serve":
            overrides = {"host": options.host, "port": options.port}
            config = config.model_copy(
                update={k: v for k, v in overrides.items() if v is not None}
            )
            serve(config)
        else:
            print_book()
    except Exception:
        logger.exception("An exception has occurred.")
        return 1
    return 0
