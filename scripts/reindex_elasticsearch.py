#!/usr/bin/env python3
"""
Rebuild the order item search index from the database.
By default enqueues the Celery task (worker must be running); --inline runs it in this process.

If you get 503 / no_shard_available from Elasticsearch, delete the broken index and reindex:
  python scripts/reindex_elasticsearch.py --reset-index

  python scripts/reindex_elasticsearch.py
  python scripts/reindex_elasticsearch.py --inline --batch-size 1000
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from order_service.config import get_settings
from order_service.queue.tasks import reindex_order_items_task
from order_service.search.elasticsearch_client import sync_es_client
from order_service.services.reindex import reindex_order_items


def delete_index():
    """Delete the order item index; the reindex recreates it with number_of_replicas=0."""
    index = get_settings().elasticsearch_index
    es = sync_es_client()
    if es.indices.exists(index=index):
        es.indices.delete(index=index)
        print(f"Deleted index '{index}'.")
    else:
        print(f"Index '{index}' does not exist (already deleted or never created).")


def main():
    ap = argparse.ArgumentParser(description="Reindex all order items into Elasticsearch")
    ap.add_argument("--reset-index", action="store_true", help="Delete the index first")
    ap.add_argument("--inline", action="store_true", help="Run now instead of enqueueing a Celery task")
    ap.add_argument("--batch-size", type=int, default=500, help="Rows per bulk request")
    args = ap.parse_args()

    if args.reset_index:
        delete_index()

    if args.inline:
        count = asyncio.run(reindex_order_items(args.batch_size))
        print(f"Reindexed {count} order items.")
    else:
        result = reindex_order_items_task.delay(args.batch_size)
        print(f"Enqueued reindex task {result.id}. Ensure a Celery worker is running.")


if __name__ == "__main__":
    main()
