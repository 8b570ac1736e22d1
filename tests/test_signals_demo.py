import io
import signal

import pytest

from sysdemos.signals_demo import install_handlers


@pytest.fixture
def installed():
    out = io.StringIO()
    previous = install_handlers(out)
    yield out, previous
    for signum, handler in previous.items():
        signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def test_previous_handlers_cover_three_signals(installed):
    _, previous = installed
    assert set(previous) == {signal.SIGUSR1, signal.SIGTERM, signal.SIGUSR2}


def test_sigusr1_reported(installed):
    out, _ = installed
    signal.raise_signal(signal.SIGUSR1)
    assert out.getvalue() == f"get_sigusr1(): Recv signal {int(signal.SIGUSR1)}\n"


def test_sigusr2_and_sigterm_reported_in_order(installed):
    out, _ = installed
    signal.raise_signal(signal.SIGUSR2)
    signal.raise_signal(signal.SIGTERM)
    assert out.getvalue().splitlines() == [
        f"get_sigusr2(): Recv signal {int(signal.SIGUSR2)}",
        f"get_sigterm(): Recv signal {int(signal.SIGTERM)}",
    ]


def test_handlers_replace_previous():
    original_term = signal.getsignal(signal.SIGTERM)
    out = io.StringIO()
    previous = install_handlers(out)
    try:
        assert previous[signal.SIGTERM] == original_term
        handler = signal.getsignal(signal.SIGUSR1)
        handler(signal.SIGUSR1, None)
        assert out.getvalue() == f"get_sigusr1(): Recv signal {int(signal.SIGUSR1)}\n"
    finally:
        for signum, old in previous.items():
            signal.signal(signum, old if old is not None else signal.SIG_DFL)