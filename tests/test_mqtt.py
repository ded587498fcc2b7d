from togos.dispatch import CommandResult, CommandResultCode, CommandSource
from togos.mqtt import MQTTCommandHandler, MQTTMaintainer
from togos.parsing import TokenizedCommand


class FakeClient:
    def __init__(self, accept=True):
        self.accept = accept
        self.online = False
        self.connects = []
        self.servers = []
        self.published = []
        self.disconnects = 0
        self.loops = 0

    def connected(self):
        return self.online

    def disconnect(self):
        self.disconnects += 1
        self.online = False

    def set_server(self, host, port):
        self.servers.append((host, port))

    def connect(self, client_id, username, pw, will_topic, will_qos, will_retain,
                will_message, clean_session):
        self.connects.append(
            (client_id, username, pw, will_topic, will_qos, will_retain,
             will_message, clean_session)
        )
        if self.accept:
            self.online = True
        return self.accept

    def loop(self):
        self.loops += 1
        return True

    def publish(self, topic, payload, retain):
        self.published.append((topic, payload, retain))
        return True

    def state(self):
        return 0 if self.online else -2


class FakeClock:
    def __init__(self, now=10_000):
        self.now = now

    def __call__(self):
        return self.now


def _standard(accept=True, now=10_000):
    client = FakeClient(accept)
    clock = FakeClock(now)
    return client, clock, MQTTMaintainer.make_standard(client, "dev1", "base", clock)


def test_standard_connect_uses_will_and_announces_online():
    client, _, m = _standard()
    m.set_server("broker.example.com", 1883, "", "")
    assert m.update() is True
    assert client.connects == [
        ("dev1", None, None, "base/status", 1, True, "disconnected", True)
    ]
    assert client.published == [("base/status", b"online", True)]
    assert m.is_connected() is True


def test_credentials_passed_when_set():
    client, _, m = _standard()
    password = "password"
    m.set_server("broker.example.com", 1883, "user", password)
    m.update()
    assert client.connects[0][1] == "user"
    assert client.connects[0][2] == password


def test_update_without_server_just_loops():
    client, _, m = _standard()
    assert m.update() is True
    assert client.connects == []
    assert client.loops == 1


def test_update_when_connected_loops():
    client, _, m = _standard()
    m.set_server("broker.example.com", 1883, "", "")
    m.update()
    assert m.update() is True
    assert client.loops == 1
    assert len(client.connects) == 1


def test_failed_reconnect_waits_before_retrying():
    client, clock, m = _standard(accept=False)
    m.set_server("broker.example.com", 1883, "", "")
    assert m.update() is False
    assert len(client.connects) == 1
    clock.now += 5000
    assert m.update() is False
    assert len(client.connects) == 1
    clock.now += 1
    assert m.update() is False
    assert len(client.connects) == 2
    assert client.published == []


def test_no_attempt_too_soon_after_start():
    client, _, m = _standard(now=100)
    m.set_server("broker.example.com", 1883, "", "")
    assert m.update() is False
    assert client.connects == []


def test_set_server_unchanged_is_noop():
    client, _, m = _standard()
    m.set_server("broker.example.com", 1883, "u", "")
    m.set_server("broker.example.com", 1883, "u", "")
    assert client.servers == [("broker.example.com", 1883)]


def test_set_server_disconnects_when_connected():
    client, _, m = _standard()
    m.set_server("a.example.com", 1883, "", "")
    m.update()
    m.set_server("b.example.com", 1884, "", "")
    assert client.disconnects == 1
    assert m.server_name == "b.example.com"
    assert m.server_port == 1884
    assert client.servers[-1] == ("b.example.com", 1884)


def test_set_client_id_same_does_nothing():
    client, _, m = _standard()
    m.set_client_id("dev1")
    assert client.disconnects == 0


def test_set_client_id_reconnects_with_new_id():
    client, _, m = _standard()
    m.set_server("broker.example.com", 1883, "", "")
    m.update()
    m.set_client_id("dev2")
    assert client.disconnects == 1
    assert m.client_id == "dev2"
    assert client.connects[-1][0] == "dev2"


def _handler(accept=True):
    client, clock, m = _standard(accept)
    return client, m, MQTTCommandHandler(m)


def _run(handler, path, *args):
    return handler(TokenizedCommand(path, " ".join(args), tuple(args)), CommandSource.CEREAL)


def test_connected_command():
    client, m, h = _handler()
    assert _run(h, "mqtt/connected") == CommandResult.ok("false")
    client.online = True
    assert _run(h, "mqtt/connected") == CommandResult.ok("true")


def test_client_id_get_and_set():
    _, m, h = _handler()
    assert _run(h, "mqtt/client-id") == CommandResult.ok("dev1")
    assert _run(h, "mqtt/client-id", "dev9") == CommandResult.ok("dev9")
    assert m.client_id == "dev9"
    assert _run(h, "mqtt/client-id", "a", "b").code is CommandResultCode.CALLER_ERROR


def test_connect_command_success():
    client, m, h = _handler()
    assert _run(h, "mqtt/connect", "broker.example.com", "1883") == CommandResult.ok("connected")
    assert client.servers == [("broker.example.com", 1883)]


def test_connect_command_with_credentials():
    client, m, h = _handler()
    password = "password"
    _run(h, "mqtt/connect", "broker.example.com", "1883", "user", password)
    assert m.username == "user"
    assert client.connects[0][2] == password


def test_connect_command_failure():
    _, _, h = _handler(accept=False)
    result = _run(h, "mqtt/connect", "broker.example.com", "1883")
    assert result == CommandResult.failed("unable to connect right now, but server/creds set")


def test_connect_command_port_parsing():
    client, _, h = _handler()
    _run(h, "mqtt/connect", "broker.example.com", "1883abc")
    _run(h, "mqtt/connect", "other.example.com", "abc")
    assert client.servers == [("broker.example.com", 1883), ("other.example.com", 0)]


def test_connect_command_bad_arg_count():
    client, _, h = _handler()
    result = _run(h, "mqtt/connect", "broker.example.com")
    assert result.code is CommandResultCode.CALLER_ERROR
    assert result.value.startswith("mqtt/connect requires 2 or 4 arguments")
    assert client.servers == []


def test_disconnect_command_clears_server():
    client, m, h = _handler()
    _run(h, "mqtt/connect", "broker.example.com", "1883")
    assert _run(h, "mqtt/disconnect") == CommandResult.ok()
    assert m.server_name == ""
    assert client.servers[-1] == ("", 0)
    assert m.is_connected() is False


def test_publish_command():
    client, _, h = _handler()
    assert _run(h, "mqtt/publish", "some/topic", "hello") == CommandResult.ok()
    assert client.published == [("some/topic", b"hello", False)]
    bad = _run(h, "mqtt/publish", "only-topic")
    assert bad.code is CommandResultCode.CALLER_ERROR
    assert "path, value" in bad.value


def test_unknown_command_shrugs():
    _, _, h = _handler()
    assert _run(h, "other/thing").code is CommandResultCode.SHRUG