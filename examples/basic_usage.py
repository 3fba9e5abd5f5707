"""Basic usage example for cursorlist."""

from cursorlist import CursorList


def main() -> None:
    """Build a small list, walk it with the cursor, then drain it."""
    lst = CursorList[str]()
    for value in "bcde":
        lst.append(value)
    lst.prepend("a")
    lst.append("f")

    print("=== Build ===")
    print(lst)

    print("\n=== Edit at cursor ===")
    lst.backward()
    lst.edit("E")
    print(f"Cursor now on {lst.get()!r}: {lst}")

    print("\n=== Drain from both ends ===")
    while lst:
        print(f"  back:  {lst.take_back()!r}")
        if lst:
            print(f"  front: {lst.take_front()!r}")

    print(f"\nExhausted: {lst.exhausted}, remaining: {len(lst)}")
    lst.close()


if __name__ == "__main__":
    main()
