"""
Run the Verifier Exchange API server

This script starts the FastAPI server. Configure it with VERIFIER_DID,
HOLDER_APP_UUID and ISSUANCE_SERVICE_URL; without them a local test
configuration is used.
"""

import uvicorn

from verifier_exchange.api import app

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Verifier Exchange API Server")
    print("=" * 60)
    print("\nEndpoints:")
    print("  - Docs: http://localhost:8000/docs")
    print("  - Health: http://localhost:8000/health")
    print("\nVerifier endpoints:")
    print("  - POST /presentationRequest")
    print("\nHolder endpoints:")
    print("  - POST /presentation  (header: version)")
    print("\n" + "=" * 60)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info",
        access_log=True,
    )
