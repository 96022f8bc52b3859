"""Port layer - Interfaces between the exchange core and adapters

Input Ports (Use Cases):
- CreatePresentationRequest: Validate, sign and register a presentation request
- SubmitPresentation: Version-gate a holder's presentation submission

Output Ports (External Dependencies):
- VerifierEntityStore: Verifier record persistence
- IssuanceProtocolClient: Presentation request construction and signing
"""

from verifier_exchange.port.input import *
from verifier_exchange.port.output import *
