"""CLI command implementations"""

from typing import Annotated, Optional

import structlog
import typer

from digestkit.config import Settings, load_config
from digestkit.core.digest import Algorithm, DigestError, hex_digest
from digestkit.log import configure_logging


logger = structlog.get_logger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)
    configure_logging(settings.log_level)
    return settings


def _read_text(text: str) -> str:
    """Return text, or all of stdin when text is '-'."""
    if text != "-":
        return text
    try:
        return typer.get_text_stream("stdin").read()
    except UnicodeDecodeError as e:
        _fail("Standard input is not valid UTF-8", e)


def hash_cmd(
    text: Annotated[str, typer.Argument(help="Text to hash; '-' reads stdin")],
    algorithm: Annotated[Optional[str], typer.Option("--algorithm", "-a", help="md5, sha1, sha256 or sha512")] = None,
    all_algorithms: Annotated[bool, typer.Option("--all", help="Print the digest for every algorithm")] = False,
    ):
    """Print the lowercase hex digest of TEXT (UTF-8 encoded)."""
    settings = _settings(overrides={"algorithm": algorithm})
    value = _read_text(text)
    selected = list(Algorithm) if all_algorithms else [Algorithm(settings.algorithm)]
    logger.debug("hashing_text", chars=len(value), algorithms=[a.value for a in selected])

    try:
        digests = [(a, hex_digest(value, a)) for a in selected]
    except DigestError as e:
        logger.warning("digest_failed", cause=e.cause.value)
        _fail(str(e))

    if all_algorithms:
        for a, digest in digests:
            typer.echo(f"{a.value:<7} {digest}")
    else:
        typer.echo(digests[0][1])


def algorithms_cmd():
    """List supported algorithms and their hex digest length."""
    for a in Algorithm:
        typer.echo(f"{a.value:<7} {a.hex_length}")
