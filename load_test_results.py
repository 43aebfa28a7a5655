"""
Load test for the contest results API.
Simulates many participants logging ascents while spectators refresh results.
"""

import asyncio
import random
import time
import aiohttp

# -----------------------------
# CONFIG - ADJUST IF NEEDED
# -----------------------------
BASE_URL = "http://127.0.0.1:5000"

# Seeded contest (see seed_contest.py)
STEP_ID = 1
CATEGORY_IDS = [1, 2]
GENRES = ["male", "female"]

# Participant / route id ranges of the seeded contest
MIN_PARTICIPANT_ID = 1
MAX_PARTICIPANT_ID = 200
ROUTE_IDS = list(range(1, 21))

# Total requests to send, and the share that are results reads
TOTAL_REQUESTS = 2000
READ_RATIO = 0.7

# How many run simultaneously
MAX_CONCURRENT = 150


# -----------------------------
# Load test functions
# -----------------------------
async def submit_ascent(session, participant_id, route_id):
    topped = random.random() < 0.5

    payload = {
        "contest_participant_id": participant_id,
        "contest_route_id": route_id,
        "realised": topped,
        "top_attempt": random.randint(1, 6) if topped else 0,
        "zone_1_attempt": random.randint(1, 4),
    }

    try:
        async with session.post(f"{BASE_URL}/api/ascents", json=payload) as resp:
            text = await resp.text()
            if resp.status != 200:
                print(f"[ERROR {resp.status}] {payload} :: {text[:200]}")
            return resp.status
    except Exception as e:
        print(f"[EXCEPTION] {e} :: {payload}")
        return None


async def fetch_results(session, category_id, genre):
    url = f"{BASE_URL}/api/steps/{STEP_ID}/categories/{category_id}/results"

    try:
        async with session.get(url, params={"genre": genre}) as resp:
            if resp.status != 200:
                text = await resp.text()
                print(f"[ERROR {resp.status}] GET {url} :: {text[:200]}")
            return resp.status
    except Exception as e:
        print(f"[EXCEPTION] {e} :: GET {url}")
        return None


async def worker(name, session, task_queue, statuses):
    while True:
        item = await task_queue.get()
        if item is None:
            task_queue.task_done()
            break

        kind, args = item
        if kind == "read":
            status = await fetch_results(session, *args)
        else:
            status = await submit_ascent(session, *args)
        statuses[status] = statuses.get(status, 0) + 1
        task_queue.task_done()


async def main():
    task_queue = asyncio.Queue()
    statuses = {}

    # Generate all simulated requests
    for _ in range(TOTAL_REQUESTS):
        if random.random() < READ_RATIO:
            await task_queue.put(("read", (random.choice(CATEGORY_IDS), random.choice(GENRES))))
        else:
            pid = random.randint(MIN_PARTICIPANT_ID, MAX_PARTICIPANT_ID)
            await task_queue.put(("write", (pid, random.choice(ROUTE_IDS))))

    # Add sentinel None tasks to close workers
    for _ in range(MAX_CONCURRENT):
        await task_queue.put(None)

    async with aiohttp.ClientSession() as session:
        workers = [
            asyncio.create_task(worker(f"worker-{i}", session, task_queue, statuses))
            for i in range(MAX_CONCURRENT)
        ]

        print(f"Sending {TOTAL_REQUESTS} requests with concurrency {MAX_CONCURRENT}...")
        start = time.time()

        await task_queue.join()
        end = time.time()

        for w in workers:
            await w

        print(f"Completed in {end - start:.2f} seconds")
        print(f"Status codes: {statuses}")


if __name__ == "__main__":
    asyncio.run(main())
