"""
Couche infrastructure (adapters).

- api/ : client HTTP TVMaze
- cli/ : ligne de commande typer
"""
