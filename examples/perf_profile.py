"""Simple profiling of nested scope emission and rendering."""

from __future__ import annotations

import timeit
import tracemalloc

from codeblocker import IndentedBuilder, Scope


def _build_nested(depth: int) -> IndentedBuilder:
    builder: IndentedBuilder = IndentedBuilder.create()
    scopes: list[Scope] = []
    for level in range(depth):
        builder.write_line(f"struct Level{level}")
        scopes.append(builder.block(semicolon=True))
    builder.write_line("int leaf;")
    for scope in reversed(scopes):
        scope.close()
    return builder


def main() -> None:
    def _flat_lines() -> None:
        builder = IndentedBuilder.create()
        for i in range(100):
            builder.write_line(f"int field{i};")

    duration: float = timeit.timeit(_flat_lines, number=1000)
    print(f"100 write_line calls: {duration:.4f}s/1000")

    nested: float = timeit.timeit(lambda: _build_nested(50), number=100)
    print(f"50 nested scopes: {nested:.4f}s/100")

    builder: IndentedBuilder = _build_nested(200)
    render: float = timeit.timeit(builder.render, number=1000)
    print(f"render() of 200 nested scopes: {render:.4f}s/1000")

    tracemalloc.start()
    _build_nested(500)
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"500 nested scopes memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
