import asyncio

import pytest

from tinyservers.redis_server import RedisSession, handle_client, main


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def resp(*parts):
    out = f"*{len(parts)}\r\n"
    for part in parts:
        out += f"${len(part)}\r\n{part}\r\n"
    return out.encode()


def test_ping():
    assert RedisSession().handle(resp("ping")) == b"+PONG\r\n"


def test_set_then_get():
    session = RedisSession()
    assert session.handle(resp("set", "foo", "bar")) == b"+OK\r\n"
    assert session.handle(resp("get", "foo")) == b"+bar"


def test_get_missing_key():
    assert RedisSession().handle(resp("get", "nothing")) == b"$-1"


def test_px_expiry():
    clock = FakeClock()
    session = RedisSession(clock=clock)
    assert session.handle(resp("set", "foo", "bar", "px", "100")) == b"+OK\r\n"
    clock.now += 0.05
    assert session.handle(resp("get", "foo")) == b"+bar"
    clock.now += 0.1
    assert session.handle(resp("get", "foo")) == b"$-1"
    assert "foo" not in session.cache


def test_set_without_px_does_not_expire_soon():
    clock = FakeClock()
    session = RedisSession(clock=clock)
    session.handle(resp("set", "k", "v"))
    clock.now += 3600
    assert session.handle(resp("get", "k")) == b"+v"


def test_other_command_echoes_last_argument():
    assert RedisSession().handle(resp("echo", "hey")) == b"+hey"


def test_single_line_gets_no_answer():
    assert RedisSession().handle(b"ping") is None


def test_set_without_value_raises():
    with pytest.raises(IndexError):
        RedisSession().handle(resp("set", "foo"))


def test_non_numeric_px_raises():
    with pytest.raises(ValueError):
        RedisSession().handle(resp("set", "foo", "bar", "px", "soon"))


def test_sessions_have_separate_caches():
    first, second = RedisSession(), RedisSession()
    first.handle(resp("set", "foo", "bar"))
    assert second.handle(resp("get", "foo")) == b"$-1"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--unknown"])
    assert excinfo.value.code == 2


@pytest.mark.asyncio
async def test_handle_client_over_socket():
    server = await asyncio.start_server(
        lambda r, w: handle_client(r, w), "127.0.0.1", 0
    )
    port = server.sockets[0].getsockname()[1]
    async with server:
        reader, writer = await asyncio.open_connection("127.0.0.1", port)
        writer.write(resp("ping"))
        await writer.drain()
        pong = await reader.read(1024)
        writer.write(resp("set", "foo", "bar"))
        await writer.drain()
        ok = await reader.read(1024)
        writer.write(resp("get", "foo"))
        await writer.drain()
        got = await reader.read(1024)
        writer.close()
        await writer.wait_closed()
    assert pong == b"+PONG\r\n"
    assert ok == b"+OK\r\n"
    assert got == b"+bar"
    local = RedisSession()
    assert pong == local.handle(resp("ping"))
    assert ok == local.handle(resp("set", "foo", "bar"))
    assert got == local.handle(resp("get", "foo"))


@pytest.mark.asyncio
async def test_handle_client_closes_on_malformed_command():
    server = await asyncio.start_server(
        lambda r, w: handle_client(r, w), "127.0.0.1", 0
    )
    port = server.sockets[0].getsockname()[1]
    async with server:
        reader, writer = await asyncio.open_connection("127.0.0.1", port)
        writer.write(resp("set", "foo"))
        await writer.drain()
        data = await reader.read(1024)
        writer.close()
        await writer.wait_closed()
    assert data == b""
    with pytest.raises(IndexError):
        RedisSession().handle(resp("set", "foo"))