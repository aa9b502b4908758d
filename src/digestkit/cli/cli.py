"""CLI entrypoint: Typer app definition and command registration"""

import typer

from digestkit.cli.commands import algorithms_cmd, hash_cmd


app = typer.Typer(name="digestkit", no_args_is_help=True, help="Hex digests of UTF-8 text")

app.command(name="hash")(hash_cmd)
app.command(name="algorithms")(algorithms_cmd)
