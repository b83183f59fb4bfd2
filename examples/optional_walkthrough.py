"""
Option basics: wrapping nullable values, map/flat_map chains, defaults.

Run: python examples/optional_walkthrough.py
"""
from optionpy import Option, Some, NONE, from_nullable, all_present, EmptyAccess


def find_index(s: str, sub: str) -> Option[int]:
    i = s.find(sub)
    return Some(i) if i != -1 else NONE


def main():
    doc = from_nullable("hello")
    print(doc, doc.get())

    # from_nullable(None) is NONE; get() on it would raise EmptyAccess
    crash: Option[int] = from_nullable(None)
    print(crash)
    try:
        crash.get()
    except EmptyAccess as e:
        print("get() failed:", e)

    hello_world = doc.map(lambda s: s + ", world!")
    wont_crash = crash.map(lambda x: x + 1)
    print(hello_world, wont_crash)

    # functions that already return an Option go through flat_map
    print(hello_world.flat_map(lambda s: find_index(s, "world")))
    print("the index is", hello_world.flat_map(lambda s: find_index(s, "XXX")).or_(-1))

    print(all_present([Some(1), Some(2), Some(3)]), all_present([Some(1), NONE]))


if __name__ == "__main__":
    main()
