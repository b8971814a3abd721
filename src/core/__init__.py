"""Core: dominio, contratos, configuración y servicios (sin I/O directo)."""
