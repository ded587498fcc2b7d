"""Keeping an MQTT connection alive, and commands that manage it."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from typing import Optional, Protocol

from togos.dispatch import CommandResult, CommandSource
from togos.parsing import TokenizedCommand

_log = logging.getLogger(__name__)

RECONNECT_INTERVAL_MS = 5000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PubSubClient(Protocol):
    """The MQTT client interface the maintainer drives."""

    def connected(self) -> bool: ...

    def disconnect(self) -> None: ...

    def set_server(self, host: str, port: int) -> None: ...

    def connect(
        self,
        client_id: str,
        username: Optional[str],
        password: Optional[str],
        will_topic: Optional[str],
        will_qos: int,
        will_retain: bool,
        will_message: Optional[str],
        clean_session: bool,
    ) -> bool: ...

    def loop(self) -> bool: ...

    def publish(self, topic: str, payload: bytes, retain: bool) -> bool: ...

    def state(self) -> int: ...


def _monotonic_millis() -> int:
    return int(time.monotonic() * 1000)


def _non_empty(value: str) -> Optional[str]:
    return value or None


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class MQTTMaintainer:
    """Wraps a client, reconnecting (with a pause between attempts) when needed.

    Server details are given separately, through ``set_server``.
    """

    def __init__(
        self,
        client: PubSubClient,
        client_id: str,
        will_topic: str,
        will_qos: int,
        will_retain: bool,
        will_message: str,
        clean_session: bool,
        reconnected_callback: Callable[[], None],
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.client = client
        self.server_name = ""
        self.server_port = 0
        self.client_id = client_id
        self.username = ""
        self._password = ""
        self._will_topic = will_topic
        self._will_qos = will_qos
        self._will_retain = will_retain
        self._will_message = will_message
        self._clean_session = clean_session
        self._reconnected_callback = reconnected_callback
        self._clock = clock or _monotonic_millis
        self._last_reconnect_attempt = 0

    @classmethod
    def make_standard(
        cls,
        client: PubSubClient,
        client_id: str,
        topic: str,
        clock: Optional[Callable[[], int]] = None,
    ) -> "MQTTMaintainer":
        """A maintainer that announces its status on ``<topic>/status``."""
        state_topic = f"{topic}/status"

        def announce() -> None:
            client.publish(state_topic, b"online", True)

        return cls(
            client,
            client_id,
            state_topic,
            1,
            True,
            "disconnected",
            True,
            announce,
            clock,
        )

    def set_server(
        self, server_name: str, server_port: int, username: str, password: str
    ) -> None:
        """Change server and credentials, disconnecting if anything changed."""
        if (
            server_name == self.server_name
            and server_port == self.server_port
            and username == self.username
            and password == self._password
        ):
            return
        if self.client.connected():
            self.client.disconnect()
        self.server_name = server_name
        self.server_port = server_port
        self.username = username
        self._password = password
        self.client.set_server(self.server_name, server_port)

    def set_client_id(self, client_id: str) -> None:
        """Change the client ID and reconnect under it."""
        if client_id == self.client_id:
            return
        self.client_id = client_id
        self.client.disconnect()
        self.update()

    def reconnect(self) -> bool:
        """Try once to connect; on success run the reconnected callback."""
        _log.debug(
            "connecting to %s:%d as %r", self.server_name, self.server_port, self.client_id
        )
        if self.client.connect(
            self.client_id,
            _non_empty(self.username),
            _non_empty(self._password),
            _non_empty(self._will_topic),
            self._will_qos,
            self._will_retain,
            _non_empty(self._will_message),
            self._clean_session,
        ):
            _log.debug("connected; running reconnected callback")
            self._reconnected_callback()
            return True
        _log.debug("connection failed; rc: %s", self.client.state())
        return False

    def update(self) -> bool:
        """Connect if a server is set and not connected; otherwise service the client."""
        if not self.client.connected() and self.server_name:
            if self._clock() - self._last_reconnect_attempt > RECONNECT_INTERVAL_MS:
                if self.reconnect():
                    self._last_reconnect_attempt = 0
                    return True
                self._last_reconnect_attempt = self._clock()
            return False
        self.client.loop()
        return True

    def is_connected(self) -> bool:
        return self.client.connected()


class MQTTCommandHandler:
    """Handles commands about the MQTT connection itself."""

    def __init__(self, maintainer: MQTTMaintainer) -> None:
        self._maintainer = maintainer

    def __call__(self, cmd: TokenizedCommand, source: CommandSource) -> CommandResult:
        maintainer = self._maintainer
        args = cmd.args
        if cmd.path == "mqtt/connected":
            return CommandResult.ok("true" if maintainer.client.connected() else "false")
        if cmd.path == "mqtt/client-id":
            if not args:
                return CommandResult.ok(maintainer.client_id)
            if len(args) == 1:
                maintainer.set_client_id(args[0])
                return CommandResult.ok(args[0])
            return CommandResult.caller_error(
                f"{cmd.path} takes 0 or 1 argument: [new client ID]"
            )
        if cmd.path == "mqtt/connect":
            if len(args) == 4:
                username, password = args[2], args[3]
            elif len(args) == 2:
                username, password = "", ""
            else:
                return CommandResult.caller_error(
                    f"{cmd.path} requires 2 or 4 arguments: server, port[, username, password]"
                )
            port = _atoi(args[1]) & 0xFFFF
            maintainer.set_server(args[0], port, username, password)
            if maintainer.update():
                return CommandResult.ok("connected")
            return CommandResult.failed("unable to connect right now, but server/creds set")
        if cmd.path == "mqtt/disconnect":
            maintainer.set_server("", 0, "", "")
            return CommandResult.ok()
        if cmd.path == "mqtt/publish":
            if len(args) != 2:
                return CommandResult.caller_error(f"{cmd.path} requires 2 arguments: path, value")
            maintainer.client.publish(args[0], args[1].encode("utf-8"), False)
            return CommandResult.ok()
        return CommandResult.shrug()