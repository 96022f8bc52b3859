from verifier_exchange.adapter.output.issuance.http_issuance_client import HttpIssuanceProtocolClient

__all__ = ["HttpIssuanceProtocolClient"]
