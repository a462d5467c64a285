#!/usr/bin/env python3
"""
Load Generator for the Delayed Hash Service

A CLI tool that hammers the submit, retrieve and stats endpoints
concurrently and reports client-side latency.
"""
import asyncio
import argparse
import time
from typing import Optional
from dataclasses import dataclass, field
import aiohttp


@dataclass
class RequestResult:
    """Result of a single request."""
    endpoint: str
    status: int
    latency_ms: float
    error: Optional[str] = None


@dataclass
class EndpointStats:
    """Aggregated statistics for one endpoint."""
    endpoint: str
    total_requests: int = 0
    status_counts: dict = field(default_factory=dict)
    errors: int = 0
    latencies_ms: list = field(default_factory=list)

    def add_result(self, result: RequestResult):
        self.total_requests += 1
        if result.error is not None:
            self.errors += 1
            return
        self.status_counts[result.status] = self.status_counts.get(result.status, 0) + 1
        self.latencies_ms.append(result.latency_ms)

    def percentile(self, p: float) -> Optional[float]:
        if not self.latencies_ms:
            return None
        sorted_data = sorted(self.latencies_ms)
        k = (len(sorted_data) - 1) * (p / 100)
        f = int(k)
        c = f + 1 if f + 1 < len(sorted_data) else f
        return round(sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f]), 2)


async def send_request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    endpoint: str,
    stats: EndpointStats,
    data: Optional[dict] = None
) -> RequestResult:
    """Send one request and record its latency."""
    start_time = time.perf_counter()

    try:
        async with session.request(method, url, data=data) as response:
            await response.read()
            result = RequestResult(
                endpoint=endpoint,
                status=response.status,
                latency_ms=(time.perf_counter() - start_time) * 1000
            )
    except aiohttp.ClientError as e:
        result = RequestResult(
            endpoint=endpoint,
            status=0,
            latency_ms=(time.perf_counter() - start_time) * 1000,
            error=str(e)
        )

    stats.add_result(result)
    return result


async def run_load_test(
    base_url: str,
    num_requests: int,
    concurrency: int,
    password: str
):
    """Run submit, retrieve and stats traffic side by side."""
    print(f"\n🚀 Starting load test")
    print(f"   Target: {base_url}")
    print(f"   Requests per endpoint: {num_requests}")
    print(f"   Concurrency: {concurrency}")
    print()

    all_stats = {
        "submit": EndpointStats(endpoint="POST /hash"),
        "retrieve": EndpointStats(endpoint="GET /hash/1"),
        "stats": EndpointStats(endpoint="GET /stats"),
    }
    semaphore = asyncio.Semaphore(concurrency)

    async def bounded_request(*args, **kwargs):
        async with semaphore:
            return await send_request(*args, **kwargs)

    async with aiohttp.ClientSession() as session:
        tasks = []
        for _ in range(num_requests):
            tasks.append(bounded_request(
                session, "POST", f"{base_url}/hash", "submit", all_stats["submit"],
                data={"password": password}
            ))
            tasks.append(bounded_request(
                session, "GET", f"{base_url}/hash/1", "retrieve", all_stats["retrieve"]
            ))
            tasks.append(bounded_request(
                session, "GET", f"{base_url}/stats", "stats", all_stats["stats"]
            ))

        start_time = time.perf_counter()
        await asyncio.gather(*tasks)
        total_time = time.perf_counter() - start_time

        async with session.get(f"{base_url}/stats") as response:
            server_stats = await response.json()

    print("=" * 60)
    print("📊 LOAD TEST RESULTS")
    print("=" * 60)
    print(f"Total time: {total_time:.2f}s")
    print(f"Requests/second: {len(tasks) / total_time:.2f}")
    print()

    for stats in all_stats.values():
        print(stats.endpoint)
        print("-" * 40)
        print(f"  Total requests:  {stats.total_requests}")
        print(f"  Status codes:    {stats.status_counts}")
        print(f"  Client errors:   {stats.errors}")
        print(f"  Latency p50:     {stats.percentile(50)} ms")
        print(f"  Latency p95:     {stats.percentile(95)} ms")
        print(f"  Latency p99:     {stats.percentile(99)} ms")
        print()

    print("Server-side stats")
    print("-" * 40)
    print(f"  Submissions:     {server_stats['total']}")
    print(f"  Average:         {server_stats['average']} µs")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Load generator for the Delayed Hash Service")
    parser.add_argument(
        "--target",
        type=str,
        default="http://localhost:8080",
        help="Base URL of the service (default: http://localhost:8080)"
    )
    parser.add_argument(
        "--requests",
        type=int,
        default=1000,
        help="Number of requests per endpoint (default: 1000)"
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=50,
        help="Number of concurrent requests (default: 50)"
    )
    parser.add_argument(
        "--password",
        type=str,
        default="angryMonkey",
        help="Password submitted with every POST (default: angryMonkey)"
    )

    args = parser.parse_args()

    asyncio.run(run_load_test(
        base_url=args.target,
        num_requests=args.requests,
        concurrency=args.concurrency,
        password=args.password
    ))


if __name__ == "__main__":
    main()
