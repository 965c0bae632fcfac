"""``n8n-mcp`` command.

Loads settings from a ``.env`` file (if present) and starts the stdio
MCP server.
"""

from pathlib import Path
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv


@click.command(name="n8n-mcp")
@click.option("--debug", is_flag=True, help="Enable debug logging (written to stderr)")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read N8N_API_URL and N8N_API_KEY from this file instead of ./.env",
)
def cli(debug: bool, env_file: Optional[Path]) -> None:
    """Serve the n8n REST API as MCP tools over stdio.

    Requires N8N_API_URL (e.g. https://n8n.example.com/api/v1) and
    N8N_API_KEY in the environment or the .env file.
    """
    # Variables already set in the environment take precedence over the file
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

    from n8n_mcp.mcp_server.main import main

    main(debug=debug)
