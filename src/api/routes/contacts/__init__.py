"""Rotas da API de contatos (protegidas por x-api-key)."""
