"""App: orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (formulário Webflow, API de contatos)
- services/: extração de contato e resolução de address book
- domain/: modelos de domínio (ContactData, AddressBookMapping, resultados)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
