#!/usr/bin/env python3
"""
Basic usage examples for the Pritunl API client library.

Reads PRITUNL_HOST, PRITUNL_TOKEN and PRITUNL_SECRET from the environment
and walks through a few authenticated calls against that server.
"""

import logging
import sys

from pritunl_client import (
    Credentials,
    PritunlClient,
    PritunlClientError,
    RequestError,
    RequestSpec,
    sign
)


def main():
    """Run basic usage examples."""

    print("=== Pritunl Client Basic Usage Examples ===\n")

    print("1. Creating client from environment...")
    client = PritunlClient.from_env()
    print(f"   Client created for: {client.credentials.host}")
    print(f"   Token: {client.credentials.token[:6]}...")
    print(f"   TLS verification: {client.config['verify_tls']}\n")

    try:
        # Example 1: Signing only
        print("2. Signing a request without sending it...")
        auth = sign(client.credentials, "GET", "/organization")
        print(f"   Timestamp: {auth.timestamp}")
        print(f"   Nonce: {auth.nonce}")
        print(f"   Signature: {auth.signature}")
        print()

        # Example 2: Listing organizations
        print("3. Listing organizations...")
        organizations = []
        client.get("/organization", out=organizations)
        print(f"   ✓ {len(organizations)} organization(s)")
        for org in organizations:
            print(f"   - {org['name']} ({org['id']})")
        print()

        # Example 3: Listing users of the first organization
        if organizations:
            org_id = organizations[0]["id"]
            print("4. Listing users with an explicit RequestSpec...")
            users = []
            response = client.do(RequestSpec("GET", f"/user/{org_id}"), users)
            if response.status_code == 200:
                print(f"   ✓ {len(users)} user(s) in {organizations[0]['name']}")
            else:
                print(f"   ✗ Listing failed: {response.status_code}")
            print()

        # Example 4: 404 is returned, not raised
        print("5. Requesting a missing organization...")
        response = client.get(f"/organization/{'0' * 24}", out={})
        if response.status_code == 404:
            print("   ✓ Missing resource reported as 404")
        else:
            print(f"   ✗ Unexpected response: {response.status_code}")
        print()

        # Example 5: Wrong secret
        print("6. Testing with wrong secret...")
        wrong = Credentials(client.credentials.host, client.credentials.token, "wrong-secret")
        with PritunlClient(wrong, verify_tls=client.config['verify_tls']) as wrong_client:
            response = wrong_client.get("/organization")
        if response.status_code == 401:
            print("   ✓ Correctly rejected wrong secret (401 Unauthorized)")
        else:
            print(f"   ✗ Unexpected response: {response.status_code}")
        print()

        print("=== All Examples Completed Successfully! ===")

    except RequestError as e:
        print(f"Request failed (status {e.status_code}): {e}")
        sys.exit(1)
    except PritunlClientError as e:
        print(f"Pritunl Client Error: {e}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG)

    try:
        main()
    except PritunlClientError as e:
        print(f"Configuration error: {e}")
        print("Set PRITUNL_HOST, PRITUNL_TOKEN and PRITUNL_SECRET first.")
        sys.exit(1)
