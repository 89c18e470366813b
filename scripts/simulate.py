"""
Lunch Rush Simulation Script

Simulates many students checking out at the same time against a running
API, then walks every order through the kitchen lifecycle.
Run from project root: python scripts/simulate.py

Start the server first:
    python -m canteen.main
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:8000"
TOTAL_STUDENTS = 30
PAYMENT_METHODS = ["cash", "upi", "card"]
LIFECYCLE = ["confirmed", "preparing", "ready", "completed"]


def generate_roll_number(index: int) -> str:
    """Generate a roll number like 22CS014."""
    branch = random.choice(["CS", "EC", "ME", "CE", "EE"])
    return f"{random.randint(20, 24)}{branch}{index:03d}"


def pick_cart(dishes: list[dict[str, Any]]) -> list[dict[str, int]]:
    """Pick 1-4 distinct dishes with small quantities."""
    chosen = random.sample(dishes, k=min(len(dishes), random.randint(1, 4)))
    return [{"dishId": d["id"], "quantity": random.randint(1, 3)} for d in chosen]


# =============================================================================
# SINGLE STUDENT FLOW
# =============================================================================

async def checkout(
    client: httpx.AsyncClient,
    index: int,
    dishes: list[dict[str, Any]],
) -> dict[str, Any]:
    """Login, price a cart and place the order."""
    start_time = time.time()
    roll_number = generate_roll_number(index)

    try:
        response = await client.post(
            f"{API_BASE_URL}/api/auth/login",
            json={"rollNumber": roll_number},
        )
        response.raise_for_status()
        student = response.json()["student"]

        cart = pick_cart(dishes)
        response = await client.post(f"{API_BASE_URL}/api/orders/quote", json={"items": cart})
        response.raise_for_status()
        quote = response.json()

        response = await client.post(
            f"{API_BASE_URL}/api/orders",
            json={
                "studentId": student["id"],
                "items": [
                    {
                        "dishId": line["dishId"],
                        "quantity": line["quantity"],
                        "price": line["unitPrice"],
                    }
                    for line in quote["items"]
                ],
                "total": quote["total"],
                "paymentMethod": random.choice(PAYMENT_METHODS),
            },
        )
        elapsed = round(time.time() - start_time, 3)

        if response.status_code == 201:
            order = response.json()
            return {
                "student": index,
                "success": True,
                "order_id": order["id"],
                "total": float(order["total"]),
                "time": elapsed,
            }
        return {
            "student": index,
            "success": False,
            "error": response.text[:100],
            "time": elapsed,
        }
    except (httpx.HTTPError, KeyError) as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "student": index,
            "success": False,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def run_kitchen(client: httpx.AsyncClient, order_id: int) -> bool:
    """Move one order through every status. Returns True when completed."""
    for status in LIFECYCLE:
        response = await client.patch(
            f"{API_BASE_URL}/api/orders/{order_id}/status",
            json={"status": status},
        )
        if response.status_code != 200:
            print(f"   Order #{order_id} stuck before '{status}': {response.text[:80]}")
            return False
    return True


# =============================================================================
# MAIN SIMULATION RUNNER
# =============================================================================

async def run_simulation(num_students: int = TOTAL_STUDENTS) -> dict[str, Any]:
    """
    Run the lunch rush simulation.

    Args:
        num_students: Number of concurrent checkouts
    """
    print("=" * 70)
    print("LUNCH RUSH SIMULATION")
    print("=" * 70)
    print(f"Students: {num_students}")
    print(f"Target: {API_BASE_URL}")
    print(f"Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(f"{API_BASE_URL}/api/dishes")
        response.raise_for_status()
        dishes = response.json()
        print(f"\nMenu loaded: {len(dishes)} dishes")

        tasks = [checkout(client, i + 1, dishes) for i in range(num_students)]
        results = await asyncio.gather(*tasks)

        successful = [r for r in results if r["success"]]
        failed = [r for r in results if not r["success"]]

        print("\nRunning the kitchen...")
        completed = await asyncio.gather(
            *(run_kitchen(client, r["order_id"]) for r in successful)
        )

    total_time = round(time.time() - start_time, 2)
    order_ids = [r["order_id"] for r in successful]

    print("\n" + "=" * 70)
    print("SIMULATION RESULTS")
    print("=" * 70)
    print(f"\nOrders placed: {len(successful)}/{num_students}")
    print(f"Orders completed: {sum(completed)}/{len(successful)}")
    print(f"Duplicate order ids: {len(order_ids) - len(set(order_ids))}")
    print(f"Total time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        revenue = sum(r["total"] for r in successful)
        print(f"\nAverage checkout: {avg_time}s")
        print(f"Revenue: Rs {revenue:.2f}")

    if failed:
        print("\nFailed checkouts (showing first 5):")
        for f in failed[:5]:
            print(f"   Student #{f['student']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_students,
        "successful": len(successful),
        "failed": len(failed),
        "completed": sum(completed),
        "total_time": total_time,
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lunch Rush Simulation")
    parser.add_argument("--students", type=int, default=TOTAL_STUDENTS, help="Number of students")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    args = parser.parse_args()

    API_BASE_URL = args.url.rstrip("/")

    summary = asyncio.run(run_simulation(args.students))
    sys.exit(0 if summary["failed"] == 0 else 1)
