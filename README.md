# sysdemos

A collection of small, self-contained programs that show common systems
programming techniques. Each one works as a library module and as a command.
They target Linux and use only the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | What it shows |
| --- | --- |
| `sysdemos.sorting` | primitive, bubble, selection, counting and quick sort, timed against the built-in sort |
| `sysdemos.searching` | linear and binary search, with and without the cost of sorting first |
| `sysdemos.singly_linked` | a singly linked list: insert at either end, delete by id, reverse |
| `sysdemos.doubly_linked` | a doubly linked list: insert at either end, delete and change by id |
| `sysdemos.dsp` | fixed-point Goertzel filters, a DTMF digit detector and a two-tone MF detector |
| `sysdemos.wave` | reading, checking and describing the header and samples of PCM WAV files |
| `sysdemos.dtmf_cli` | finds DTMF digits in a WAV file and writes a copy with the tones removed |
| `sysdemos.strings` | splitting a SIP URI into number, address and port, and a line into words |
| `sysdemos.fileops` | writing a text file, reading it line by line, looking up a `name = value` parameter |
| `sysdemos.gold_mine` | worker threads sharing a counter under a lock |
| `sysdemos.select_pipes` | waiting on standard input and a pipe at once with `select` |
| `sysdemos.local_socket` | datagram and sequenced-packet servers and clients on Unix sockets |
| `sysdemos.timing` | measuring elapsed time with several clocks |
| `sysdemos.signals_demo` | installing signal handlers and raising signals to the own process |
| `sysdemos.backtrace_demo` | printing the call stack from mutually recursive functions |
| `sysdemos.perf_loop` | a loop that rewrites a file at an interval read from another file |
| `sysdemos.mtdctl` | reading, writing, inspecting and testing MTD flash devices |
| `sysdemos.shared_mine` | worker processes sharing a counter in shared memory with a semaphore |
| `sysdemos.iface` | listing network interfaces with their state, address and netmask |

## Commands

Every demo has a command of its own:

```
sysdemos-sort           # compare sorting algorithms on random data
sysdemos-search         # compare linear and binary search
sysdemos-slist          # walk through singly linked list operations
sysdemos-dlist          # walk through doubly linked list operations
sysdemos-dtmf in.wav    # detect DTMF digits, write out.wav without them
sysdemos-strings        # parse a sample SIP URI and split a sample line
sysdemos-fileops        # write, read and query a temporary text file
sysdemos-gold-mine      # threads taking gold from a shared mine
sysdemos-select         # report what arrives on stdin or from a ticking pipe
sysdemos-socket ROLE    # Unix socket server or client
sysdemos-timing         # time a busy loop with several clocks
sysdemos-signals        # install handlers and send signals to itself
sysdemos-backtrace      # print stack traces from recursive calls
sysdemos-perf           # rewrite tmp.txt at the interval in timeout.txt
sysdemos-mtdctl ...     # MTD control utility
sysdemos-shared-mine    # processes taking gold from shared memory
sysdemos-iface          # list network interfaces
```

Options accepted by the commands:

| Command | Options |
| --- | --- |
| `sysdemos-sort` | `--size`, `--max-value`, `--seed`, `--with-primitive` (also run the very slow primitive sort) |
| `sysdemos-search` | `--size`, `--max-value`, `--seed` |
| `sysdemos-dtmf` | `filename`, `--output` (default `out.wav`) |
| `sysdemos-strings` | `--text`, `--uri` |
| `sysdemos-fileops` | optional path of the scratch file (default `tmp_file.txt`, removed afterwards) |
| `sysdemos-gold-mine` | `--workers`, `--total`, `--per-take` |
| `sysdemos-select` | `--interval` (seconds between pipe messages), `--timeout` (select timeout) |
| `sysdemos-socket` | `dgram-server`, `dgram-client`, `seqpacket-server` or `seqpacket-client`; `--path` (default `./file.sock`), `--message` (datagram client) |
| `sysdemos-timing` | `--outer`, `--inner` |
| `sysdemos-backtrace` | `--depth` |
| `sysdemos-perf` | `--timeout-file`, `--output`, `--iterations` (runs forever without it) |
| `sysdemos-shared-mine` | `--workers`, `--total`, `--per-take` |

### sysdemos-socket

Start a server in one terminal and the matching client in another:

```
sysdemos-socket dgram-server
sysdemos-socket dgram-client --message hello
```

The datagram server echoes each message back until it receives `DOWN`. The
sequenced-packet server reads a session up to `END` (or `DOWN`, which also
stops the server) and answers `Test session completed`.

### sysdemos-mtdctl

```
sysdemos-mtdctl [ACTION] [OPTS]

ACTION:
    -r   read from MTD device
    -w   write to MTD device
    -i   get information about MTD device
    -t   test MTD device
OPTS:
    -o   offset in hex (default 0x0)
    -m   MTD device name
    -v   file for log messages
    -s   string to write
    -c   number of test iterations
    -p   print as hex dump
```

For example, to dump the first page of a block device as hex:

```
sysdemos-mtdctl -r -m /dev/mtdblock3 -p
```

Device names containing `block` are treated as block devices, others as
character devices. Reading works on both; character-device reads require a
NAND device with an OOB size of 64, 16 or 8 bytes. A test writes 1024 pages
of random data, reads each back and reports the number of mismatches.

### sysdemos-dtmf

Takes the path of a PCM WAV file, prints its header and each DTMF digit it
detects, and writes the output file (`out.wav` by default) with every 10 ms
frame that carried a tone set to silence.

## Using the modules

The functions behind the commands can be imported directly, for instance
`sysdemos.sorting.quick_sort`, `sysdemos.searching.binary_search`,
`sysdemos.strings.parse_sip_uri`, `sysdemos.wave.WaveHeader.from_bytes`,
`sysdemos.dsp.DtmfDetector` or `sysdemos.iface.list_interfaces`.

```python
from sysdemos.dsp import DtmfDetector

detector = DtmfDetector(8000)
detector.set_callback(lambda on, digit: print("on" if on else "off", digit))
held = detector.detect(samples)   # digit currently held, or None
print(detector.digits)
```

## Limitations

- Several modules rely on Linux interfaces (`fcntl` ioctls, Unix sequenced-packet
  sockets, `SIGUSR1`/`SIGUSR2`) and do not work on other systems.
- `sysdemos-mtdctl` cannot write to MTD character devices; it only reports
  that this is not supported.
- WAV files are read only in PCM format with the canonical 44-byte header,
  and each frame is reduced to a single 16-bit sample (the last channel).
- The MF detector reports only that all configured tones (at most two) are
  present, using the marker `sysdemos.dsp.MF_HIT`; it does not decode MF digits.