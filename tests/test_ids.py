from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from study_planner.services.ids import SequentialAllocator, UuidAllocator


def test_sequential_allocator_counts_from_one() -> None:
    allocator = SequentialAllocator("course")

    assert [allocator.allocate() for _ in range(3)] == ["course-1", "course-2", "course-3"]


def test_sequential_allocator_is_unique_across_threads() -> None:
    allocator = SequentialAllocator("s")

    def draw(_: int) -> list[str]:
        return [allocator.allocate() for _ in range(2000)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        batches = list(pool.map(draw, range(8)))

    ids = [identifier for batch in batches for identifier in batch]
    assert len(ids) == 16000
    assert len(set(ids)) == 16000
    assert {f"s-{n}" for n in range(1, 16001)} == set(ids)


def test_uuid_allocator_never_repeats() -> None:
    allocator = UuidAllocator()

    assert len({allocator.allocate() for _ in range(500)}) == 500
