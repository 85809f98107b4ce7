"""
Smoke test script for a running recipe API:
- POST /api/generate with a few representative payloads
- prints status code and a short summary of each recipe

Requires:
  pip install requests

Default base_url: http://127.0.0.1:8080
"""
import argparse
import json
from typing import Any, Dict, List

import requests

SAMPLE_PAYLOADS: List[Dict[str, Any]] = [
    {"diet": "vegana", "objective": "bajar", "kca": 2000, "allergies": ["nueces"]},
    {"diet": ["Omnivora"], "objective": ["subir"], "kca": "1800", "conditions": ["diabetes tipo 2"]},
    {"diet": "Pescetariana", "objective": "mantener", "kca": 2200, "intolerance": ["lactosa"], "budget": "bajo"},
]


def _pp(title: str, obj: Any):
    print(f"\n===== {title} =====")
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _post(base_url: str, path: str, payload: Dict[str, Any], timeout: int = 120) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return requests.post(url, json=payload, timeout=timeout)


def _summary(recipes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for r in recipes:
        kcal = sum(float(i.get("calories") or 0) for i in r.get("ingredients") or [])
        out.append({
            "title": r.get("title"),
            "duration": r.get("duration"),
            "ingredients": len(r.get("ingredients") or []),
            "steps": len(r.get("steps") or []),
            "kcal": round(kcal),
        })
    return out


def run_generate(base_url: str, payload: Dict[str, Any], timeout: int):
    r = _post(base_url, "/api/generate", payload, timeout=timeout)
    body = r.json()
    if r.status_code != 200:
        _pp(f"Generate FAILED ({r.status_code})", {"payload": payload, "response": body})
        return
    _pp(f"Generate OK ({len(body)} recipes)", {"payload": payload, "recipes": _summary(body)})


def main():
    parser = argparse.ArgumentParser(description="Recipe API smoke test")
    parser.add_argument("--base-url", default="http://127.0.0.1:8080", help="API base URL")
    parser.add_argument("--timeout", type=int, default=120)
    parser.add_argument("--payload", help="JSON payload to send instead of the built-in samples")
    args = parser.parse_args()

    payloads = [json.loads(args.payload)] if args.payload else SAMPLE_PAYLOADS
    for p in payloads:
        run_generate(args.base_url, p, args.timeout)


if __name__ == "__main__":
    main()
