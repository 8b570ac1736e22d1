"""Reading, writing, inspecting and testing MTD flash devices."""

from __future__ import annotations

import contextlib
import enum
import errno
import fcntl
import getopt
import os
import random
import struct
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

PAGE_SIZE = 2048
BUFF_SIZE = PAGE_SIZE
TEST_PAGES = 16 * 64  # 16 blocks of 64 pages

_INFO_LAYOUT = struct.Struct("@BIIIIIQ")
# _IOR('M', 1, struct mtd_info_user)
MEMGETINFO = (2 << 30) | (_INFO_LAYOUT.size << 16) | (ord("M") << 8) | 1

_NAND_OOB_SIZES = (64, 16, 8)

_USAGE = """
MTD Control utility

Usage:
    {app} [ACTION] [OPTS]
ACTION:
    -r   read form MTD device
    -w   write to MTD device
    -i,  get information of MTD device
    -t   test MTD device
OPTS:
    -o   offset in HEX (default:0x0)
    -m   MTD device name
    -v   file for write log msg
    -s   string for write
    -c   count of iterations (for test MTD)
    -p   print nice (hexdump)
"""


class Action(enum.Enum):
    """What the utility is asked to do."""

    NONE = 0
    READ = 1
    WRITE = 2
    INFO = 3
    TEST = 4


class MtdError(Exception):
    """Raised when an MTD device cannot be opened, queried, read or written."""


@dataclass(frozen=True)
class MtdInfo:
    """The fields of the kernel's ``mtd_info_user`` structure."""

    type: int
    flags: int
    size: int
    erasesize: int
    writesize: int
    oobsize: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> MtdInfo:
        """Decode the structure as filled in by MEMGETINFO."""
        if len(raw) < _INFO_LAYOUT.size:
            raise MtdError(f"mtd info too short: {len(raw)} of {_INFO_LAYOUT.size} bytes")
        mtd_type, flags, size, erasesize, writesize, oobsize, _ = _INFO_LAYOUT.unpack_from(raw)
        return cls(mtd_type, flags, size, erasesize, writesize, oobsize)

    def describe(self) -> str:
        return (
            f"MTD type: {self.type}\n"
            f"MTD total size : {self.size} bytes\n"
            f"MTD erase size : {self.erasesize} bytes\n"
            f"MTD OOB size   : {self.oobsize} bytes\n"
        )


@contextlib.contextmanager
def _open_device(path: str | os.PathLike[str], kind: str):
    try:
        fd = os.open(path, os.O_RDWR)
    except OSError as exc:
        raise MtdError(f"Can't open MTD {kind} device: {exc.strerror or exc}") from exc
    try:
        yield fd
    finally:
        os.close(fd)


def block_read(offset: int, path: str | os.PathLike[str], length: int = BUFF_SIZE) -> bytes:
    """Read up to ``length`` bytes at ``offset`` from an MTD block device."""
    with _open_device(path, "block") as fd:
        try:
            return os.pread(fd, length, offset)
        except OSError as exc:
            raise MtdError(f"Can't read from MTD block device: {exc.strerror or exc}") from exc


def block_write(offset: int, path: str | os.PathLike[str], data: bytes) -> int:
    """Write ``data`` at ``offset`` to an MTD block device; return bytes written."""
    with _open_device(path, "block") as fd:
        try:
            written = os.pwrite(fd, data, offset)
        except OSError as exc:
            raise MtdError(f"Can't write to MTD block device: {exc.strerror or exc}") from exc
        os.fsync(fd)
    return written


def _query_info(fd: int) -> MtdInfo:
    buffer = bytearray(_INFO_LAYOUT.size)
    try:
        fcntl.ioctl(fd, MEMGETINFO, buffer)
    except OSError as exc:
        raise MtdError(f"MEMGETINFO fail: {exc.strerror or exc}") from exc
    return MtdInfo.from_bytes(bytes(buffer))


def char_get_info(path: str | os.PathLike[str]) -> MtdInfo:
    """Query an MTD char device for its geometry."""
    with _open_device(path, "char") as fd:
        return _query_info(fd)


def char_read(offset: int, path: str | os.PathLike[str], length: int = BUFF_SIZE) -> bytes:
    """Read exactly ``length`` bytes at ``offset`` from a NAND MTD char device."""
    with _open_device(path, "char") as fd:
        info = _query_info(fd)
        if info.oobsize not in _NAND_OOB_SIZES:
            raise MtdError("Unknown flash (not normal NAND)")
        try:
            data = os.pread(fd, length, offset)
        except OSError as exc:
            raise MtdError(f"Can't read from MTD char device: {exc.strerror or exc}") from exc
    if len(data) != length:
        raise MtdError(f"Can't read from MTD char device: got {len(data)} of {length} bytes")
    return data


def run_test(
    offset: int,
    path: str | os.PathLike[str],
    pages: int,
    rng: random.Random | None = None,
    log: TextIO | None = None,
) -> int:
    """Write random pages, read them back and compare; return the error count."""
    rng = rng or random.Random()
    log = log if log is not None else sys.stderr
    errors = 0
    for _ in range(pages):
        written = bytes(rng.randrange(255) for _ in range(BUFF_SIZE))
        with contextlib.suppress(MtdError):
            block_write(offset, path, written)
        try:
            read_back = block_read(offset, path, BUFF_SIZE)
        except MtdError:
            read_back = b""
        read_back = read_back.ljust(BUFF_SIZE, b"\0")
        if read_back != written:
            log.write(f"Offset 0x{offset:x} FAIL (WR 0x{written[0]:02x} <> 0x{read_back[0]:02x})\n")
            errors += 1
        offset += BUFF_SIZE
    log.write(f"Test end, error count = {errors}\n")
    return errors


def format_dump(offset: int, data: bytes, nice: bool = False) -> str:
    """Render ``data`` as a hexdump (``nice``) or as a C string."""
    if not nice:
        text = data.split(b"\0", 1)[0].decode("latin-1")
        return f"\n0x{offset:08x}: '{text}'\n"
    parts = []
    for index, byte in enumerate(data):
        if index % 16 == 0:
            parts.append(f"\n0x{(offset + index) & 0xFFFFFFFF:08x}:")
        parts.append(f" {byte:02x}")
    parts.append("\n")
    return "".join(parts)


@dataclass(frozen=True)
class _Options:
    action: Action
    mtd_name: str
    offset: int = 0
    count: int = 1
    log_path: str | None = None
    text: str | None = None
    nice: bool = False


_ACTION_FLAGS = {"-r": Action.READ, "-w": Action.WRITE, "-i": Action.INFO, "-t": Action.TEST}


def parse_args(argv: Sequence[str]) -> _Options:
    """Parse command-line options (without the program name); raise ValueError on misuse."""
    if not argv:
        raise ValueError("no args")
    try:
        opts, _ = getopt.getopt(list(argv), "rwito:m:v:s:c:p")
    except getopt.GetoptError as exc:
        raise ValueError(str(exc)) from exc

    action = Action.NONE
    offset, count, nice = 0, 1, False
    mtd_name = log_path = text = None
    for flag, value in opts:
        if flag in _ACTION_FLAGS:
            if action is not Action.NONE:
                raise ValueError("double action")
            action = _ACTION_FLAGS[flag]
        elif flag == "-o":
            try:
                offset = int(value, 16)
            except ValueError:
                raise ValueError("incorrect offset") from None
            if offset < 0:
                raise ValueError("incorrect offset")
        elif flag == "-m":
            mtd_name = value
        elif flag == "-v":
            log_path = value
        elif flag == "-s":
            text = value
        elif flag == "-c":
            try:
                count = int(value)
            except ValueError:
                raise ValueError("incorrect count") from None
            if count < 0:
                raise ValueError("incorrect count")
        elif flag == "-p":
            nice = True

    if mtd_name is None:
        raise ValueError("empty MTD device name")
    if action is Action.NONE:
        raise ValueError("incorrect action")
    if action is Action.WRITE and text is None:
        raise ValueError("empty string for write")
    return _Options(action, mtd_name, offset, count, log_path, text, nice)


def _run(options: _Options, log: TextIO) -> None:
    name = options.mtd_name
    is_block = "block" in name
    if options.action is Action.READ:
        reader = block_read if is_block else char_read
        data = reader(options.offset, name, BUFF_SIZE)
        if data:
            log.write(format_dump(options.offset, data.ljust(BUFF_SIZE, b"\0"), options.nice))
    elif options.action is Action.WRITE:
        if is_block:
            block_write(options.offset, name, options.text.encode())
        else:
            log.write("Writing to MTD char devices is not supported\n")
    elif options.action is Action.INFO:
        log.write(char_get_info(name).describe())
    elif options.action is Action.TEST:
        rng = random.Random()
        for iteration in range(options.count):
            log.write(f"{iteration}/{options.count}: Start test iteration\n")
            run_test(options.offset, name, TEST_PAGES, rng, log)


def main(argv: Sequence[str] | None = None) -> int:
    app = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "mtdctl"
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(argv)
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        sys.stderr.write(_USAGE.format(app=app) + "\n")
        return 1

    with contextlib.ExitStack() as stack:
        if options.log_path is not None:
            try:
                log = stack.enter_context(open(options.log_path, "w", encoding="utf-8"))
            except OSError as exc:
                sys.stderr.write(f"Can't create output file: {exc.strerror or exc}\n")
                return 1
        else:
            log = sys.stderr
        try:
            _run(options, log)
        except MtdError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())