#!/usr/bin/env python3
"""
Seed script: creates order items via the API (no direct DB), so both the database
and the search index get populated.
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --orders 50 --items-per-order 5
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api"

PRODUCTS = [
    (1001, "Mechanical keyboard"), (1002, "Wireless mouse"), (1003, "Bluetooth headphones"),
    (1004, "27 inch monitor"), (1005, "HD webcam"), (1006, "USB-C cable"),
    (1007, "Laptop stand"), (1008, "Coffee maker"), (1009, "Electric kettle"),
    (1010, "Smart watch"), (1011, "Power bank"), (1012, "External hard drive"),
    (1013, "64GB flash drive"), (1014, "Memory card"), (1015, "Multi-port adapter"),
    (1016, "Backpack"), (1017, "Laptop sleeve"), (1018, "Stylus pen"),
    (1019, "Ring light"), (1020, "Tripod"),
]

PRICES = ["0.99", "4.99", "9.99", "19.99", "49.99", "99.00", "199.00", "499.00"]


def main():
    ap = argparse.ArgumentParser(description="Seed order items via API")
    ap.add_argument("--orders", type=int, default=30, help="Number of orders to spread items over")
    ap.add_argument("--items-per-order", type=int, default=4, help="Order items per order")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.orders * args.items_per_order} order items...")
        for order_id in range(1, args.orders + 1):
            for product_id, name in random.sample(PRODUCTS, k=min(args.items_per_order, len(PRODUCTS))):
                try:
                    r = client.post(
                        "/order-items",
                        json={
                            "order_id": order_id,
                            "product_id": product_id,
                            "product_name": name,
                            "quantity": random.randint(1, 5),
                            "unit_price": random.choice(PRICES),
                        },
                    )
                    if r.status_code == 201:
                        created += 1
                    else:
                        errors.append(f"Order {order_id}: {r.status_code} {r.text[:80]}")
                except httpx.HTTPError as e:
                    errors.append(f"Order {order_id}: {e}")
            if order_id % 10 == 0:
                print(f"  ... {order_id} orders")

    print(f"Created {created} order items.")
    if errors:
        print(f"{len(errors)} errors (first 10):")
        for e in errors[:10]:
            print(f"  {e}")


if __name__ == "__main__":
    main()
