import json
import os
import sys
from fastapi.testclient import TestClient

"""Manual smoke check against the real reference feed.

Hits the configured RATES_URL (ECB daily by default) through the full app stack
and prints a few conversions, one unknown code and one non-positive amount.
Requires network access; not part of the pytest suite.
"""


def run():
    from eurofx.main import create_app
    from eurofx.core.config import Settings

    client = TestClient(create_app(settings_override=Settings()))
    calls = {
        "from_euro": client.get("/from-euro", params={"to": "USD", "value": 100}),
        "to_euro": client.get("/to-euro", params={"from": "USD", "value": 100}),
        "cross": client.get("/convert", params={"from": "GBP", "to": "JPY", "value": 100}),
        "unknown": client.get("/convert", params={"from": "ZZZ", "to": "EUR", "value": 1}),
        "zero": client.get("/convert", params={"from": "ZZZ", "to": "EUR", "value": 0}),
    }
    print(
        json.dumps(
            {k: {"status": r.status_code, "body": r.json()} for k, r in calls.items()},
            indent=2,
        )
    )


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
