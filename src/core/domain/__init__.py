"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y los errores del
dominio. El dominio no conoce la CLI ni el sistema operativo.
"""
