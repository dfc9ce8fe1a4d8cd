"""Disk fragmenter: compact a dense disk map and compute its checksum."""

from dataclasses import dataclass


def _digits(text):
    digits = "".join(text.split())
    if not digits.isdigit() and digits:
        raise ValueError("a disk map holds digits only")
    return [int(char) for char in digits]


def expand_disk_map(text):
    """Blocks of the disk: a file id per used block, None per free block."""
    blocks = []
    for index, length in enumerate(_digits(text)):
        is_free = index % 2 == 1
        blocks.extend([None if is_free else index // 2] * length)
    return blocks


def compact_blocks(blocks):
    """Move file blocks one by one from the end into the leftmost free block.

    Returns the compacted disk without its trailing free space.
    """
    disk = list(blocks)
    left, right = 0, len(disk) - 1
    while True:
        while left < len(disk) and disk[left] is not None:
            left += 1
        while right >= 0 and disk[right] is None:
            right -= 1
        if left >= right:
            break
        disk[left], disk[right] = disk[right], None
    return disk[: right + 1]


@dataclass
class _Span:
    file_id: int
    length: int
    start: int
    free: bool


def compact_files(text):
    """Move whole files into free spans.

    Free spans are filled from left to right; each takes the rightmost
    unmoved file to its right that still fits, as often as one fits.
    """
    blocks = expand_disk_map(text)
    spans = []
    start = 0
    for index, length in enumerate(_digits(text)):
        spans.append(_Span(index // 2, length, start, index % 2 == 1))
        start += length

    for i, gap in enumerate(spans[:-1]):
        if not gap.free:
            continue
        while True:
            mover = next(
                (
                    span
                    for span in reversed(spans[i + 1:])
                    if not span.free and span.length <= gap.length
                ),
                None,
            )
            if mover is None:
                break
            for offset in range(mover.length):
                blocks[gap.start + offset] = mover.file_id
                blocks[mover.start + offset] = None
            gap.length -= mover.length
            gap.start += mover.length
            mover.free = True
    return blocks


def checksum(blocks):
    """Sum of position times file id over every used block."""
    return sum(
        position * file_id
        for position, file_id in enumerate(blocks)
        if file_id is not None
    )


def block_checksum(text):
    """Checksum after compacting block by block."""
    return checksum(compact_blocks(expand_disk_map(text)))


def file_checksum(text):
    """Checksum after compacting whole files."""
    return checksum(compact_files(text))