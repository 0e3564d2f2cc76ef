"""CLI (Typer + Rich): monta la página y pinta sus vistas."""
