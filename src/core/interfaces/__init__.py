"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende de estas abstracciones, no de `zoneinfo` ni del sistema
  operativo.
"""
