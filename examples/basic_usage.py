"""
Basic usage example for the Verifier Exchange

This script demonstrates:
1. Registering a Verifier in the entity store
2. Creating and recording a signed presentation request against a simulated issuance service
3. Picking up a rotated auth token
4. Version-gating presentation submissions
"""

import asyncio
import json

import httpx
from joserfc.jwk import ECKey
from returns.result import Success

from verifier_exchange.adapter import (
    HttpIssuanceProtocolClient,
    InMemoryPresentationRequestStore,
    InMemoryVerifierStore,
)
from verifier_exchange.application import (
    AuthTokenRotator,
    CreatePresentationRequestImpl,
    PresentationRequestRecorder,
    RequestValidator,
    SendRequestOrchestrator,
    SubmitPresentationImpl,
    VersionGate,
)
from verifier_exchange.config import configure_logging, create_test_config
from verifier_exchange.domain import SystemClock, Verifier


def issuance_service(request: httpx.Request) -> httpx.Response:
    """Stand-in for the issuance service: registers the request and rotates the token"""
    signed = json.loads(request.content)
    body = {
        "presentationRequest": signed,
        "deeplink": f"https://unumid.co/presentationRequest/{signed['uuid']}",
        "qrCode": "data:image/png;base64,iVBORw0KGgo=",
    }
    return httpx.Response(201, json=body, headers={"x-auth-token": "Bearer rotated-token"})


async def main():
    """Run the example"""
    configure_logging("INFO")

    print("=" * 60)
    print("Verifier Exchange - Basic Usage Example")
    print("=" * 60)

    # 1. Setup
    print("\n1. Setting up verifier...")

    config = create_test_config()
    clock = SystemClock()
    store = InMemoryVerifierStore(clock=clock)
    presentation_requests = InMemoryPresentationRequestStore()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(issuance_service))
    issuance_client = HttpIssuanceProtocolClient(config, clock, http_client=http_client)

    signing_key = ECKey.generate_key("P-256", private=True)
    await store.save(
        Verifier(
            id="verifier-1",
            verifier_did=config.verifier_did,
            auth_token="initial-token",
            signing_private_key=signing_key.as_pem(private=True).decode("utf-8"),
            updated_at=clock.now(),
        )
    )

    rotator = AuthTokenRotator(store, config)
    create_presentation_request = CreatePresentationRequestImpl(
        validator=RequestValidator(),
        orchestrator=SendRequestOrchestrator(rotator, issuance_client, config),
        recorder=PresentationRequestRecorder(presentation_requests),
    )
    submit_presentation = SubmitPresentationImpl(VersionGate())

    print(f"✓ Verifier {config.verifier_did} registered")

    # 2. Create a presentation request
    print("\n2. Creating presentation request...")

    result = await create_presentation_request.execute(
        {
            "credentialRequests": [{"type": "EmailCredential", "issuers": ["did:unum:issuer1"]}],
            "holderAppUuid": config.holder_app_uuid,
            "metadata": {"fields": {"orderId": 42}},
        }
    )
    signed = result.unwrap()
    print(f"✓ Deeplink: {signed['deeplink']}")
    print(f"  Proof: {signed['presentationRequest']['proof']['jws'][:40]}...")

    record = (await presentation_requests.get(signed["presentationRequest"]["uuid"])).unwrap()
    print(f"✓ Recorded {record.uuid}, expires at {record.expires_at.isoformat()}")

    # 3. The issuance service rotated the token
    print("\n3. Checking auth token...")

    verifier = (await rotator.current_verifier()).unwrap()
    print(f"✓ Stored auth token is now: {verifier.auth_token}")

    # 4. Holders submit presentations with a version header
    print("\n4. Submitting presentations...")

    submission = {
        "presentationRequestInfo": signed,
        "encryptedPresentation": {"data": "ciphertext", "iv": "iv", "key": "key", "algorithm": "aes-256-cbc"},
    }
    for version in ["3.0.0", "2.1.0", "1.0.0", "latest"]:
        outcome = await submit_presentation.execute(dict(submission), {"version": version})
        if isinstance(outcome, Success):
            print(f"✓ {version}: accepted as {outcome.unwrap().wire_format}")
        else:
            print(f"✗ {version}: {outcome.failure()}")

    await http_client.aclose()

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
