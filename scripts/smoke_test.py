#!/usr/bin/env python
"""
Clinic backend smoke test
=========================
Quick end-to-end check against a running server after a deployment.

Usage:
    python scripts/smoke_test.py [--base-url http://localhost:8000]
    python scripts/smoke_test.py --username staff --password secret

With credentials the script also logs in, creates a patient and lists
patients. The created patient is left in place; remove it through the
admin site.
"""

import argparse
import json
import sys
import time
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen


def call(base_url: str, method: str, path: str, token: str | None = None, payload: dict | None = None):
    """Return (status, parsed JSON body or None)."""
    url = f"{base_url.rstrip('/')}{path}"
    headers = {'Accept': 'application/json'}
    data = None
    if payload is not None:
        data = json.dumps(payload).encode('utf-8')
        headers['Content-Type'] = 'application/json'
    if token:
        headers['Authorization'] = f'Bearer {token}'

    req = Request(url, data=data, headers=headers, method=method)
    try:
        with urlopen(req, timeout=10) as response:
            status, raw = response.status, response.read()
    except HTTPError as e:
        status, raw = e.code, e.read()

    try:
        body = json.loads(raw) if raw else None
    except ValueError:
        body = None
    return status, body


def check(base_url: str, method: str, path: str, expected_status: int, description: str = "", **kwargs):
    try:
        status, body = call(base_url, method, path, **kwargs)
    except URLError as e:
        print(f"  [FAIL] {method} {path} -> Connection error: {e.reason}")
        return False, None

    if status == expected_status:
        print(f"  [OK] {method} {path} -> {status} {description}")
        return True, body
    print(f"  [FAIL] {method} {path} -> {status} (expected {expected_status})")
    return False, body


def patient_cycle(base_url: str, username: str, password: str) -> list:
    results = []

    ok, body = check(base_url, "POST", "/api/auth/login/", 200, "Login",
                     payload={"username": username, "password": password})
    results.append(ok)
    if not ok:
        return results
    token = body["access"]

    payload = {
        "first_name": "Smoke",
        "last_name": "Test",
        "date_of_birth": "2000-01-01",
        "email": None,
    }
    ok, body = check(base_url, "POST", "/api/patients/", 201, "Create patient", token=token, payload=payload)
    results.append(ok and body == {"data": payload})

    ok, body = check(base_url, "GET", "/api/patients/", 200, "List patients", token=token)
    results.append(ok and bool(body and body.get("data")))
    if not ok or not body.get("meta"):
        return results

    # Newest patient sits on the last page (ordered by id).
    last_page = body["meta"]["last_page"]
    ok, body = check(base_url, "GET", f"/api/patients/?page={last_page}", 200, "Last page", token=token)
    results.append(ok)

    return results


def main():
    parser = argparse.ArgumentParser(description="Clinic backend smoke test")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--wait", type=int, default=0, help="Seconds to wait before testing")
    parser.add_argument("--username", help="Staff username for the authenticated checks")
    parser.add_argument("--password", help="Staff password for the authenticated checks")
    args = parser.parse_args()

    if args.wait:
        print(f"Waiting {args.wait} seconds for the server...")
        time.sleep(args.wait)

    print("=" * 60)
    print("  Clinic backend smoke test")
    print(f"  Base URL: {args.base_url}")
    print("=" * 60)

    tests = [
        # (method, path, expected_status, description)
        ("GET", "/", 200, "Root"),
        ("GET", "/api/health/", 200, "Health check"),
        ("GET", "/api/auth/login/", 405, "Auth endpoint (POST only)"),
        ("GET", "/api/patients/", 401, "Patients (auth required)"),
        ("POST", "/api/patients/", 401, "Create (auth required)"),
        ("GET", "/api/patients/1/", 401, "Show (auth required)"),
        ("PATCH", "/api/patients/1/", 401, "Update (auth required)"),
        ("DELETE", "/api/patients/1/", 401, "Delete (auth checked first)"),
    ]

    print("\n[1] ENDPOINT TESTS")
    print("-" * 60)

    results = []
    for method, path, expected, desc in tests:
        ok, _ = check(args.base_url, method, path, expected, desc)
        results.append(ok)

    if args.username and args.password:
        print("\n[2] PATIENT CYCLE")
        print("-" * 60)
        results.extend(patient_cycle(args.base_url, args.username, args.password))

    passed = sum(results)
    total = len(results)

    print("\n" + "=" * 60)
    print(f"  RESULT: {passed}/{total} checks passed")
    print("=" * 60)

    if passed == total:
        print("\n  [SUCCESS] All smoke tests passed!")
        return 0
    print(f"\n  [FAILED] {total - passed} checks failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
