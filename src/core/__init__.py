"""Core: dominio, configuración, estado y servicios sin dependencias de UI."""
