"""Protocolos (contratos) consumidos pela camada app/.

Implementações concretas ficam em api/connectors/ e são conectadas em
app/bootstrap/.
"""

from app.protocols.contact_gateway import ContactGatewayProtocol

__all__ = ["ContactGatewayProtocol"]
