"""Basic usage example for bandedlist."""

from bandedlist import BandedList, EmptyContainerError


def main() -> None:
    """Demonstrate the linear and coordinate views of a banded list."""
    # Three elements per level
    web = BandedList[str](band_capacity=3)

    print("=== Building ===\n")
    for value in ["a", "b", "c", "d", "e"]:
        web.append(value)
    web.appendleft("start")

    print(web)
    web.dump()

    print("\n=== Coordinate access ===\n")
    print(f"Level 1 holds indexes 0..{web.max_index_for(1)}")
    print(f"(1, 0) -> {web.get(1, 0)}")
    old = web.set(1, 0, "C")
    print(f"Replaced {old!r} at (1, 0) with {web.get(1, 0)!r}")

    print("\n=== Cross-links ===\n")
    node = web.first_node
    column = []
    while node is not None:
        column.append(node.value)
        node = node.next_band
    print(f"Index 0 on every level: {column}")

    print("\n=== Search ===\n")
    web.append("a")
    print(f"First 'a': {web.index_of('a')}")
    print(f"Last 'a':  {web.last_index_of('a')}")
    print(f"Missing:   {web.index_of('zzz')}")

    print("\n=== Draining ===\n")
    snapshot = web.copy()
    while True:
        try:
            print(f"  popped {web.popleft()!r}")
        except EmptyContainerError:
            break
    print(f"Drained: {web}")
    print(f"Copy untouched: {snapshot}")


if __name__ == "__main__":
    main()
