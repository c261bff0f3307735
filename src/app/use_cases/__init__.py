"""Casos de uso (orquestração sobre protocolos, sem IO direto)."""
