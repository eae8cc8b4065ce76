"""Deadlock detection and recovery on a resource allocation graph.

Vertices are locks and processes. A request edge runs from a process to
the lock it waits for; an allocation edge runs from a lock to the
process that holds it. A cycle is a deadlock.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

NPROC = 20


class VertexKind(enum.Enum):
    LOCK = "lockid"
    PROCESS = "pid"


class Vertex(NamedTuple):
    kind: VertexKind
    ident: int

    def __str__(self) -> str:
        return f"{self.kind.value}={self.ident}"


@dataclass(frozen=True)
class Deadlock:
    """A detected cycle and the process killed to break it."""

    cycle: tuple[Vertex, ...]
    pid: int
    lockid: int

    def __str__(self) -> str:
        nodes = " ".join(str(vertex) for vertex in self.cycle)
        return (
            f"DEADLOCK: {nodes}\n"
            f"DEADLOCK RECOVER: killing pid={self.pid} to release lockid={self.lockid}"
        )


class ResourceAllocationGraph:
    """Request and allocation edges between processes and locks.

    on_recover, if given, is called with (lockid, pid) when a process is
    chosen as the victim, so that the caller can release the lock and kill
    the process.
    """

    def __init__(
        self,
        nlocks: int,
        nprocs: int = NPROC,
        on_recover: Callable[[int, int], object] | None = None,
    ) -> None:
        if nlocks < 0 or nprocs < 0:
            raise ValueError("vertex counts must not be negative")
        self.nlocks = nlocks
        self.nprocs = nprocs
        self._on_recover = on_recover
        self._edges: set[tuple[int, int]] = set()

    def _lock(self, lockid: int) -> int:
        if not 0 <= lockid < self.nlocks:
            raise ValueError(f"no such lock: {lockid}")
        return lockid

    def _proc(self, pid: int) -> int:
        if not 0 <= pid < self.nprocs:
            raise ValueError(f"no such process: {pid}")
        return self.nlocks + pid

    def _vertex(self, index: int) -> Vertex:
        if index < self.nlocks:
            return Vertex(VertexKind.LOCK, index)
        return Vertex(VertexKind.PROCESS, index - self.nlocks)

    def _adjacent(self, index: int) -> list[int]:
        return sorted(dst for src, dst in self._edges if src == index)

    def request(self, pid: int, lockid: int) -> None:
        """Record that pid waits for lockid."""
        self._edges.add((self._proc(pid), self._lock(lockid)))

    def alloc(self, pid: int, lockid: int) -> None:
        """Record that lockid was granted to pid, replacing its request."""
        proc, lock = self._proc(pid), self._lock(lockid)
        self._edges.add((lock, proc))
        self._edges.discard((proc, lock))

    def dealloc(self, pid: int, lockid: int) -> None:
        """Record that pid released lockid."""
        self._edges.discard((self._lock(lockid), self._proc(pid)))

    def detect(self) -> Deadlock | None:
        """Find the first cycle, recover from it and describe it.

        Returns None when the graph is deadlock-free.
        """
        visited: set[int] = set()
        on_stack: set[int] = set()
        for start in range(self.nlocks + self.nprocs):
            if start in visited:
                continue
            found = self._search(start, visited, on_stack)
            if found is not None:
                return found
        return None

    def _search(self, vertex: int, visited: set[int], on_stack: set[int]) -> Deadlock | None:
        visited.add(vertex)
        on_stack.add(vertex)
        for neighbour in self._adjacent(vertex):
            if neighbour not in visited:
                found = self._search(neighbour, visited, on_stack)
                if found is not None:
                    return found
            elif neighbour in on_stack:
                return self._break_cycle(vertex, neighbour)
        on_stack.discard(vertex)
        return None

    def _cycle_through(self, start: int) -> list[int]:
        visited: set[int] = set()

        def walk(vertex: int) -> list[int] | None:
            visited.add(vertex)
            for neighbour in self._adjacent(vertex):
                if neighbour == start:
                    return [vertex]
                if neighbour not in visited:
                    rest = walk(neighbour)
                    if rest is not None:
                        return rest + [vertex]
            visited.discard(vertex)
            return None

        return walk(start) or [start]

    def _break_cycle(self, vertex: int, neighbour: int) -> Deadlock:
        cycle = tuple(self._vertex(index) for index in self._cycle_through(vertex))
        if vertex < self.nlocks:
            lockid, victim = vertex, neighbour
        else:
            held = [lock for lock in range(self.nlocks) if (lock, vertex) in self._edges]
            lockid, victim = held[-1], vertex
        pid = victim - self.nlocks
        self.recover(lockid, pid)
        return Deadlock(cycle, pid, lockid)

    def recover(self, lockid: int, pid: int) -> None:
        """Kill pid to release lockid, dropping all of its edges."""
        self._lock(lockid)
        proc = self._proc(pid)
        for lock in range(self.nlocks):
            self._edges.discard((proc, lock))
            self._edges.discard((lock, proc))
        if self._on_recover is not None:
            self._on_recover(lockid, pid)