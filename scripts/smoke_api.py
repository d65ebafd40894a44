#!/usr/bin/env python3
"""
Smoke checks for the rxlog API endpoints.
Run the API server first: python api_server.py
Then run this: python scripts/smoke_api.py

Note: this writes real lines to the server's configured log files.
"""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

VALID_PRESCRIPTION = {
    "id": 1,
    "first_name": "Alice",
    "last_name": "Peter",
    "address": "1/60 Roberts St, VI, 3012",
    "sphere": 2.5,
    "cylinder": -1.75,
    "axis": 90,
    "examination_date": "23/10/2024",
    "optometrist": "Dr. Williams",
}


def _banner(title):
    print("\n" + "=" * 50)
    print(f"TEST: {title}")
    print("=" * 50)


def _dump(response):
    print(f"Status Code: {response.status_code}")
    print(f"Response: {json.dumps(response.json(), indent=2)}")


def check_health():
    _banner("Health Check")
    response = requests.get(f"{BASE_URL}/health")
    _dump(response)
    return response.status_code == 200


def check_index():
    _banner("API Info")
    response = requests.get(f"{BASE_URL}/")
    _dump(response)
    return response.status_code == 200


def check_invalid_prescription():
    _banner("Prescription With Invalid Sphere")
    payload = dict(VALID_PRESCRIPTION, id=3, sphere=-21.0)
    response = requests.post(f"{BASE_URL}/api/prescriptions", json=payload)
    _dump(response)
    return response.status_code == 422


def check_bad_date():
    _banner("Prescription With Malformed Date")
    payload = dict(VALID_PRESCRIPTION, examination_date="2024-10-23")
    response = requests.post(f"{BASE_URL}/api/prescriptions", json=payload)
    _dump(response)
    return response.status_code == 400


def check_valid_prescription():
    _banner("Valid Prescription")
    response = requests.post(f"{BASE_URL}/api/prescriptions", json=VALID_PRESCRIPTION)
    _dump(response)
    if response.status_code == 201:
        return response.json().get("token")
    return None


def check_remark(token, remark, category, expected_status):
    _banner(f"Remark ({category})")
    response = requests.post(
        f"{BASE_URL}/api/prescriptions/{token}/remarks",
        json={"remark": remark, "category": category},
    )
    _dump(response)
    return response.status_code == expected_status


def check_record(token):
    _banner("Get Record")
    response = requests.get(f"{BASE_URL}/api/prescriptions/{token}")
    _dump(response)
    return response.status_code == 200


def main():
    print("=" * 50)
    print("rxlog API Smoke Checks")
    print("=" * 50)
    print(f"Base URL: {BASE_URL}")
    print("Make sure the API server is running!")

    results = {}
    try:
        results["Health Check"] = check_health()
        results["API Info"] = check_index()
        results["Invalid Sphere"] = check_invalid_prescription()
        results["Malformed Date"] = check_bad_date()

        token = check_valid_prescription()
        results["Valid Prescription"] = token is not None
        if token:
            results["Client Remark"] = check_remark(
                token, "This is a great service overall", "Client", 201)
            results["Duplicate Client Remark"] = check_remark(
                token, "Staff were patient and very helpful", "client", 422)
            results["Optometrist Remark"] = check_remark(
                token, "Excellent service but a bit slow", "Optometrist", 201)
            results["Third Remark"] = check_remark(
                token, "Would happily come back here again", "Client", 422)
            results["Get Record"] = check_record(token)
        else:
            print("\nERROR: Could not create a prescription. Remark checks skipped.")
    except requests.RequestException as e:
        print(f"\n\nERROR: {e}", file=sys.stderr)

    print("\n" + "=" * 50)
    print("SUMMARY")
    print("=" * 50)
    passed = sum(1 for v in results.values() if v)
    for name, ok in results.items():
        status = "✓ PASS" if ok else "✗ FAIL"
        print(f"{status}: {name}")
    print(f"\nTotal: {passed}/{len(results)} checks passed")
    print("=" * 50)
    return 0 if results and passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
