"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar la CLI con:
- `python -m main list`

El código vive en `src/`, así que sin `pip install -e .` Python no encuentra
`cli`, `core` ni `adapters`; aquí se añade `src/` al path antes de importar.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    # Las tarjetas usan caracteres fuera de cp1252 en terminales Windows.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
