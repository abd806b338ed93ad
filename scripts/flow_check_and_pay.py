#!/usr/bin/env python3
"""
Availability, pricing and payment flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_check_and_pay.py --accommodation-id 3 --start 2026-07-01 --end 2026-07-05
    python scripts/flow_check_and_pay.py --accommodation-id 3 --start 2026-07-01 --end 2026-07-05 \
        --booking-id 0b7c2a51-2f7e-4d9a-9e53-0f1d2c3b4a59 --currency EUR --plan deposit

Flow:
    1. Save currency preference
    2. Check availability
    3. Quote the stay
    4. Show deposit / remaining split
    5. Initiate payment and print the payment page URL
"""

import argparse
import json
import sys
import uuid

import httpx

BASE_URL = "http://localhost:8000"


def api_request(
    client_id: str,
    method: str,
    endpoint: str,
    data: dict | None = None,
    params: dict | None = None,
) -> dict:
    """Make an API request as the given client."""
    headers = {"X-Client-ID": client_id}
    url = f"{BASE_URL}{endpoint}"

    if method == "GET":
        response = httpx.get(url, headers=headers, params=params, timeout=10.0, follow_redirects=True)
    elif method == "POST":
        response = httpx.post(url, headers=headers, json=data or {}, timeout=30.0, follow_redirects=True)
    elif method == "PUT":
        response = httpx.put(url, headers=headers, json=data or {}, timeout=10.0, follow_redirects=True)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict) -> bool:
    """Print result, returning False on an error status."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    print(json.dumps(result["data"], indent=2))
    return True


def main():
    parser = argparse.ArgumentParser(description="Availability, pricing and payment flow")
    parser.add_argument("--accommodation-id", type=int, required=True, help="Accommodation ID")
    parser.add_argument("--start", required=True, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", required=True, help="End date (YYYY-MM-DD)")
    parser.add_argument("--booking-id", help="Existing booking UUID to pay for")
    parser.add_argument("--currency", default="TND", help="Display and payment currency")
    parser.add_argument("--plan", default="full", choices=["deposit", "full"], help="Payment plan")
    args = parser.parse_args()

    client_id = f"flow-{uuid.uuid4().hex[:8]}"

    # Step 1: Save currency preference
    print_step(1, f"Save currency preference ({args.currency})")
    pref_result = api_request(client_id, "PUT", "/api/v1/preferences/currency", {"currency": args.currency})
    if not print_result(pref_result):
        sys.exit(1)

    # Step 2: Check availability
    print_step(2, "Check availability")
    availability = api_request(
        client_id,
        "GET",
        f"/api/v1/availability/{args.accommodation_id}",
        params={"start": args.start, "end": args.end},
    )
    if not print_result(availability):
        sys.exit(1)
    if not availability["data"].get("available"):
        print("\nWARNING: dates are not available")

    # Step 3: Quote the stay
    print_step(3, "Quote the stay")
    quote = api_request(
        client_id,
        "GET",
        f"/api/v1/accommodations/{args.accommodation_id}/quote",
        params={"start": args.start, "end": args.end},
    )
    if not print_result(quote):
        sys.exit(1)

    if not args.booking_id:
        print("\nNo --booking-id given, stopping before payment")
        return

    # Step 4: Payment split
    print_step(4, "Deposit / remaining split")
    split = api_request(client_id, "GET", f"/api/v1/bookings/{args.booking_id}/payments")
    if not print_result(split):
        sys.exit(1)

    # Step 5: Initiate payment
    print_step(5, f"Initiate payment ({args.plan})")
    payment = api_request(client_id, "POST", "/api/v1/payments/init", {
        "booking_id": args.booking_id,
        "plan": args.plan,
        "currency": args.currency,
    })
    if not print_result(payment):
        sys.exit(1)

    print("\n" + "="*60)
    print("FLOW COMPLETE")
    print("="*60)
    print(f"Pay here: {payment['data']['pay_url']}")


if __name__ == "__main__":
    main()
