"""Allow ``python -m n8n_mcp``."""

from n8n_mcp.cli import cli

if __name__ == "__main__":
    cli()
