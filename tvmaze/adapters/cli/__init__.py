"""Interface en ligne de commande tvmaze (typer + rich)."""
