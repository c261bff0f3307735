"""Connectors: adapters de borda para APIs externas.

Estrutura:
- sendpulse/: API REST do SendPulse (token OAuth, address books)
- webflow/: webhooks de formulário do Webflow (assinatura, parsing)
"""

__all__: list[str] = []
