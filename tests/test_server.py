import io
import os
import signal
from unittest import mock

import pytest

from minitalk.client import send_message
from minitalk.protocol import char_to_bits, message_to_bits
from minitalk.server import Server


@pytest.fixture
def restore_handlers():
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def _deliver(server, bits):
    for bit in bits:
        server.handle_signal(signal.SIGUSR1 if bit else signal.SIGUSR2, None)


def test_single_character_written():
    out = io.StringIO()
    server = Server(file=out)
    _deliver(server, char_to_bits("Z"))
    assert out.getvalue() == "Z"


def test_partial_byte_writes_nothing():
    out = io.StringIO()
    server = Server(file=out)
    _deliver(server, char_to_bits("Z")[:7])
    assert out.getvalue() == ""


def test_nul_writes_newline():
    out = io.StringIO()
    server = Server(file=out)
    _deliver(server, char_to_bits(0))
    assert out.getvalue() == "\n"


def test_consecutive_messages():
    out = io.StringIO()
    server = Server(file=out)
    _deliver(server, message_to_bits("one"))
    _deliver(server, message_to_bits("two"))
    assert out.getvalue() == "one\ntwo\n"


def test_multibyte_character_assembled():
    out = io.StringIO()
    server = Server(file=out)
    _deliver(server, message_to_bits("naïve ✓"))
    assert out.getvalue() == "naïve ✓\n"


def test_install_sets_handlers(restore_handlers):
    server = Server(file=io.StringIO())
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
    assert signal.getsignal(signal.SIGUSR2) == server.handle_signal


def test_real_signals_to_self(restore_handlers):
    out = io.StringIO()
    server = Server(file=out)
    server.install()
    send_message(os.getpid(), "ok", delay=0)
    assert out.getvalue() == "ok\n"


def test_serve_forever_waits_for_signals(restore_handlers):
    server = Server(file=io.StringIO())
    with mock.patch("signal.pause", side_effect=[None, KeyboardInterrupt]) as pause:
        with pytest.raises(KeyboardInterrupt):
            server.serve_forever()
    assert pause.call_count == 2
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal


def test_main_prints_pid(restore_handlers, capsys):
    from minitalk.server import main

    with mock.patch("signal.pause", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    assert capsys.readouterr().out == f"{os.getpid()}\n"