"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass, field, replace


def _calculate_checksum(file_id: int, start: int, end: int) -> int:
    """Sum of ``position * file_id`` for positions in ``[start, end)``."""
    if end <= start:
        return 0
    return file_id * (start + end - 1) * (end - start) // 2


@dataclass
class File:
    start_pos: int
    length: int
    id: int
    is_empty: bool

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.start_pos, self.id

    def pop_n(self, n: int) -> int:
        """Take up to ``n`` blocks off this file; empty space yields nothing."""
        if self.is_empty:
            self.length = 0
            return 0
        taken = min(self.length, n)
        self.length -= taken
        return taken

    def checksum(self, offset: int) -> int:
        if self.is_empty:
            return 0
        return _calculate_checksum(self.id, offset, offset + self.length)

    def __str__(self) -> str:
        symbol = "." if self.is_empty else str(self.id)
        return symbol * self.length


def _first_free_index(files: list[File], start: int) -> int:
    """Offset from ``start`` of the first non-empty free space."""
    for offset, candidate in enumerate(files[start:]):
        if candidate.is_empty and candidate.length > 0:
            return offset
    raise ValueError("no free space left on the disk")


@dataclass
class FileSystem:
    files: list[File] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> FileSystem:
        files: list[File] = []
        is_empty = False
        ptr = 0
        file_id = 0
        for char in text:
            if not char.isdigit() or not char.isascii():
                raise ValueError(f"invalid disk map digit: {char!r}")
            length = int(char)
            files.append(File(ptr, length, file_id, is_empty))
            ptr += length
            if is_empty:
                file_id += 1
            is_empty = not is_empty
        return cls(files)

    def __str__(self) -> str:
        return "".join(str(file) for file in self.files)

    def checksum_a(self) -> int:
        """Checksum after moving single blocks from the end into free space."""
        files = deque(replace(f) for f in self.files)
        checksum = 0
        offset = 0
        while files:
            file = files.popleft()
            if not file.is_empty:
                checksum += file.checksum(offset)
                offset += file.length
                continue
            remaining = file.length
            while remaining > 0 and files:
                last = files[-1]
                n = last.pop_n(remaining)
                checksum += _calculate_checksum(last.id, offset, offset + n)
                offset += n
                remaining -= n
                if last.length == 0:
                    files.pop()
        return checksum

    def checksum_b(self) -> int:
        """Checksum after moving whole files into the leftmost fitting space."""
        return sum(file.checksum(file.start_pos) for file in self.reorder_b())

    def reorder_b(self) -> list[File]:
        """Layout after moving each file, highest id first, as far left as it fits."""
        final = [replace(f) for f in self.files if f.length > 0]
        first_empty = 0

        for file in reversed(self.files):
            if file.is_empty:
                continue

            key = file.sort_key
            idx = bisect_left(final, key, key=lambda f: f.sort_key)
            if idx >= len(final) or final[idx].sort_key != key:
                raise ValueError(f"file {file.id} is missing from the layout")

            if first_empty > idx:
                continue

            insert_pos = next(
                (
                    pos
                    for pos in range(first_empty, idx)
                    if final[pos].is_empty and final[pos].length >= file.length
                ),
                None,
            )
            if insert_pos is None:
                continue

            to_move = final[idx]
            final[idx] = File(to_move.start_pos, to_move.length, to_move.id, True)
            target = final[insert_pos]
            to_move = replace(to_move, start_pos=target.start_pos)
            if to_move.length == target.length:
                final[insert_pos] = to_move
            else:
                final.insert(insert_pos, to_move)
                target.start_pos += to_move.length
                target.length -= to_move.length

            first_empty += _first_free_index(final, first_empty)
        return final


def part_a(text: str) -> int:
    return FileSystem.parse(text.strip()).checksum_a()


def part_b(text: str) -> int:
    return FileSystem.parse(text.strip()).checksum_b()


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)