"""API: camada de borda e adapters externos.

Responsabilidades:
- Receber requests (webhooks Webflow, API de contatos)
- Validar assinaturas e payloads
- Normalizar payloads externos para modelos internos
- Falar com o SendPulse (connector HTTP)

Subpastas:
- connectors/: adapters HTTP (sendpulse/, webflow/)
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP (webhooks, contatos, health)

NÃO PODE conter: regras de consentimento, orquestração de use cases.
"""
