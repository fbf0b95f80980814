#!/usr/bin/env python3
"""Move one item of a profile collection through the reorder API.

Lists the collection, applies the move optimistically with the same code the
editor uses, persists it through POST /api/v1/profile/reorder and prints the
order before and after (or the rollback, if the server refuses).

Usage (from the repo root, with the API running):
    uv run python tools/reorder_items.py social_links 0 2 --token <jwt>
    uv run python tools/reorder_items.py payment_methods 3 0 --user-id <uuid> --email me@example.com
"""

import argparse
import asyncio
import os
import sys
from uuid import UUID

from dotenv import load_dotenv

load_dotenv()

# Ensure the repo root is on sys.path so `app` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.schemas.ordering import CollectionType, OrderedItem  # noqa: E402
from app.services.auth import auth_service  # noqa: E402
from app.services.ordering import sort_by_position  # noqa: E402
from app.services.reorder_client import ReorderClient  # noqa: E402
from app.services.reorder_sync import ReorderPersistError, apply_reorder  # noqa: E402


def describe(row: dict) -> str:
    return row.get("label") or row.get("name") or row.get("platform") or row["id"]


def print_order(title: str, items, rows_by_id: dict[str, dict]) -> None:
    print(f"\n{title}")
    for item in items:
        print(f"  {item.position:>3}  {describe(rows_by_id[item.id])}  ({item.id})")


async def run(args: argparse.Namespace) -> int:
    token = args.token or os.getenv("ACCESS_TOKEN")
    if not token:
        if not (args.user_id and args.email):
            print("ERROR: pass --token, set ACCESS_TOKEN, or give --user-id and --email.")
            return 1
        token = auth_service.create_access_token(UUID(args.user_id), args.email)

    collection_type = CollectionType(args.collection)
    client = ReorderClient(access_token=token, base_url=args.base_url)

    rows = await client.list_items(collection_type)
    if not rows:
        print(f"No {collection_type.value} found.")
        return 0

    rows_by_id = {row["id"]: row for row in rows}
    items = sort_by_position(
        [OrderedItem(id=row["id"], position=row["position"]) for row in rows]
    )
    print_order("Current order:", items, rows_by_id)

    def on_update(new_items) -> None:
        print_order("Showing:", new_items, rows_by_id)

    try:
        await apply_reorder(
            items, args.from_index, args.to_index, collection_type, client.persist, on_update
        )
    except ReorderPersistError as e:
        print(f"\nReorder rejected, rolled back: {e}")
        return 1

    print("\nSaved.")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Reorder a profile collection via the API.")
    parser.add_argument("collection", choices=[t.value for t in CollectionType])
    parser.add_argument("from_index", type=int, help="Current index of the item to move")
    parser.add_argument("to_index", type=int, help="Index to move it to")
    parser.add_argument("--token", help="Access token (defaults to $ACCESS_TOKEN)")
    parser.add_argument("--user-id", help="Mint a token for this user with JWT_SECRET_KEY")
    parser.add_argument("--email", help="Email claim for a minted token")
    parser.add_argument("--base-url", default=None, help="API base URL (defaults to API_BASE_URL)")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
