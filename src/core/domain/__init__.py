"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y el idioma.
- El dominio no conoce HTTP, CLI, ni Rich: solo conceptos del problema.
"""
