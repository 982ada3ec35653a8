from __future__ import annotations

import csv
from datetime import date, timedelta
from pathlib import Path
import sys
import os

import psutil

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from fastapi.testclient import TestClient

from study_planner.main import create_app

ITERATIONS = 1000
ASSIGNMENT_COUNT = 40
RUNS = [
    (Path("benchmarks_dry_run.csv"), {"dry_run": True}),
    (Path("benchmarks_replace.csv"), {"mode": "replace"}),
]


def seed(client: TestClient, *, assignments: int) -> None:
    response = client.post("/api/v1/courses/", json={"name": "Benchmark", "credits": 5})
    response.raise_for_status()
    course_id = response.json()["id"]
    today = date.today()
    for index in range(assignments):
        response = client.post(
            "/api/v1/assignments/",
            json={
                "course_id": course_id,
                "title": f"Benchmark assignment {index + 1:02d}",
                "due_date": (today + timedelta(days=index % 14)).isoformat(),
                "priority": ["low", "medium", "high"][index % 3],
                "estimated_hours": 1 + index % 8,
            },
        )
        response.raise_for_status()


def _resources(process: psutil.Process) -> tuple[float, float]:
    times = process.cpu_times()
    return times.user + times.system, process.memory_info().rss / (1024 * 1024)


def run_benchmark(*, iterations: int, filename: Path, client: TestClient, payload: dict) -> None:
    """Repeat one scheduler run and record timing, memory and plan size per run."""

    process = psutil.Process(os.getpid())
    rows: list[tuple[int, float, float, float, int, float]] = []
    for run_id in range(1, iterations + 1):
        cpu_before, _ = _resources(process)
        response = client.post("/api/v1/scheduler/run", json=payload)
        response.raise_for_status()
        cpu_after, rss_mb = _resources(process)

        result = response.json()
        metrics = result["metrics"]
        rows.append(
            (
                run_id,
                float(result.get("runtime_ms") or 0.0),
                (cpu_after - cpu_before) * 1000.0,
                rss_mb,
                metrics["session_count"],
                metrics["planned_hours"],
            )
        )

    with filename.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["run_id", "runtime_ms", "cpu_time_ms", "rss_mb", "session_count", "planned_hours"])
        writer.writerows(rows)


def main() -> None:
    client = TestClient(create_app())
    seed(client, assignments=ASSIGNMENT_COUNT)
    for filename, payload in RUNS:
        run_benchmark(iterations=ITERATIONS, filename=filename, client=client, payload=payload)
        print(f"Scheduler benchmark ({payload}) written to {filename}")


if __name__ == "__main__":
    main()
