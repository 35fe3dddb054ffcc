"""
Place loading script
--------------------
Reads a places.jsonl file (one place object per line) into the database.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# allow running from a checkout without installing
sys.path.insert(0, str(PROJECT_ROOT))

from sqlalchemy.orm import Session  # noqa: E402

from tourism.core.config import get_settings  # noqa: E402
from tourism.db.session import create_session_factory  # noqa: E402
from tourism.services.places import create_place  # noqa: E402


def iter_jsonl(path: Path):
    """Yield each JSON object in the file; blank and malformed lines are skipped."""
    with path.open("r", encoding="utf-8") as fp:
        for line in fp:
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                continue


def to_place_payload(record: dict) -> dict | None:
    """Map a JSONL record to place fields, or None when a required field is missing."""
    payload = {
        "name": record.get("name"),
        "description": record.get("description") or "",
        "category": record.get("category"),
        "latitude": record.get("latitude"),
        "longitude": record.get("longitude"),
        "image_url": record.get("image_url") or record.get("imageUrl"),
        "video_url": record.get("video_url") or record.get("videoUrl"),
        "audio_url": record.get("audio_url") or record.get("audioUrl"),
    }
    for field in ("name", "category", "latitude", "longitude"):
        if payload[field] is None or payload[field] == "":
            return None
    # coordinates are stored as decimal strings
    payload["latitude"] = str(payload["latitude"])
    payload["longitude"] = str(payload["longitude"])
    return payload


def load_places(jsonl_path: Path, db: Session) -> tuple[int, int, int]:
    """Load places from JSONL. Returns (success, skipped, failed)."""
    success = 0
    skipped = 0
    failed = 0

    for record in iter_jsonl(jsonl_path):
        payload = to_place_payload(record)
        if payload is None:
            skipped += 1
            if skipped <= 5:
                print(f"[SKIP] missing required fields: {record}", file=sys.stderr)
            continue
        try:
            create_place(db, payload)
            success += 1
        except Exception as exc:  # noqa: BLE001
            failed += 1
            if failed <= 5:
                print(f"[FAIL] {payload['name']}: {exc}", file=sys.stderr)

    return success, skipped, failed


def main() -> None:
    parser = argparse.ArgumentParser(description="places.jsonl -> database")
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("places.jsonl"),
        help="JSONL file with one place per line (default: ./places.jsonl)",
    )
    args = parser.parse_args()

    if not args.input.exists():
        raise SystemExit(f"File not found: {args.input}")

    factory = create_session_factory(get_settings().database_url)
    if factory is None:
        raise SystemExit("DATABASE_URL is not set")

    db = factory()
    try:
        print(f"Loading places from {args.input}...")
        success, skipped, failed = load_places(args.input, db)

        print("\n" + "=" * 60)
        print("Place loading finished")
        print("=" * 60)
        print(f"  loaded:  {success}")
        print(f"  skipped: {skipped}")
        print(f"  failed:  {failed}")
        print("=" * 60)
    finally:
        db.close()


if __name__ == "__main__":
    main()
