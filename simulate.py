"""
Simple simulation script against a running server.
"""

import requests
import random
import time
import sys


PRIZES = ["$5", "$10", "$25", "Free spins", "Try again"]


def main():
    BASE_URL = "http://localhost:8000/api"
    NUM_USERS = 10
    NUM_CONCURRENT_READS = 20

    print("=== StreamerPulse Simulation ===\n")

    response = requests.get(BASE_URL)
    if response.status_code != 200:
        print(f"X Server not reachable: {response.status_code}")
        sys.exit(1)

    # Track visits
    print(f"\nTracking {NUM_USERS} visitors...")
    for i in range(NUM_USERS):
        requests.post(f"{BASE_URL}/tracking/visitors", json={"session_id": f"sim-{i}-{int(time.time())}"})

    # Enter the giveaway
    print(f"\nSubmitting {NUM_USERS} giveaway entries...")
    emails = []
    stamp = int(time.time())
    for i in range(NUM_USERS):
        email = f"user{i}_{stamp}@example.com"
        response = requests.post(
            f"{BASE_URL}/giveaway/submit-entry",
            json={
                "affiliate_username": f"player_{i}",
                "affiliate_user_id": f"{stamp}{i}",
                "email": email
            }
        )
        if response.status_code == 200:
            emails.append(email)
            print(f"  Entry {i + 1}: {email}")
        else:
            print(f"  Entry {i + 1} failed: {response.text}")

    # Duplicate entry must be rejected
    if emails:
        response = requests.post(
            f"{BASE_URL}/giveaway/submit-entry",
            json={"affiliate_username": "dup", "affiliate_user_id": "dup", "email": emails[0]}
        )
        print(f"\nDuplicate entry response: {response.status_code}")

    # Spin the wheel, twice for each user
    print("\nSpinning...")
    outcomes = {"recorded": 0, "rejected": 0}
    for email in emails:
        for _ in range(2):
            response = requests.post(
                f"{BASE_URL}/giveaway/spin-result",
                json={"email": email, "prize": random.choice(PRIZES)}
            )
            if response.status_code == 200:
                outcomes["recorded"] += 1
            else:
                outcomes["rejected"] += 1
    print(f"  Spins recorded: {outcomes['recorded']}, rejected: {outcomes['rejected']}")

    # Hammer the leaderboard; the cache should absorb the reads
    print(f"\nReading leaderboard {NUM_CONCURRENT_READS} times...")
    started = time.time()
    timestamps = set()
    for _ in range(NUM_CONCURRENT_READS):
        response = requests.get(f"{BASE_URL}/leaderboard")
        if response.status_code == 200:
            timestamps.add(response.json()["timestamp"])
    elapsed = time.time() - started
    print(f"  {NUM_CONCURRENT_READS} reads in {elapsed:.2f}s, {len(timestamps)} distinct cache timestamps")

    # Display results
    print("\n=== Leaderboard (Top 5) ===\n")
    response = requests.get(f"{BASE_URL}/leaderboard")
    if response.status_code == 200:
        body = response.json()
        print(f"Source: {body['source']} at {body['timestamp']}")
        for entry in body["data"][:5]:
            print(f"  {entry['rank']}. {entry['username']}: {entry['totalWager']:.2f} wagered, reward {entry['reward']:.0f}")

    print("\n Simulation complete!")


if __name__ == "__main__":
    main()
