"""
Audio Bridge
OSC link to the SuperCollider tone server (supercollider/echo_tone.scd)

State:
- "suspended" until the first resume() or a verified connect()
- "running" while messages are being sent
- back to "suspended" on disconnect or after HEARTBEAT_MISS_LIMIT
  unanswered heartbeats

resume() is fire-and-forget and never waits for the server, so the first
tone after launch is not delayed. connect() is the explicit, verified
path: ping/pong check, then heartbeat monitoring on a QTimer.

Ports: sends to OSC_SEND_PORT (sclang), replies arrive on OSC_RECEIVE_PORT.
"""

import threading

from pythonosc import udp_client
from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import ThreadingOSCUDPServer
from PyQt5.QtCore import QObject, pyqtSignal, QTimer

from echocanvas.config import (
    OSC_HOST, OSC_SEND_PORT, OSC_RECEIVE_PORT, OSC_PATHS,
)
from echocanvas.utils.logger import logger

STATE_SUSPENDED = "suspended"
STATE_RUNNING = "running"


class AudioBridge(QObject):
    """Sends tone and master-bus messages to SuperCollider."""

    connection_lost = pyqtSignal()
    state_changed = pyqtSignal(str)

    PING_TIMEOUT_MS = 1000
    HEARTBEAT_INTERVAL_MS = 2000
    HEARTBEAT_MISS_LIMIT = 3

    def __init__(self, host=None, port=None):
        super().__init__()
        self.host = host or OSC_HOST
        self.port = port or OSC_SEND_PORT

        self.client = None
        self.connected = False
        self._state = STATE_SUSPENDED

        self._reply_server = None
        self._pong = threading.Event()
        self._heartbeat_received = False
        self._missed_heartbeats = 0
        self._heartbeat_timer = None

    # === State ===

    @property
    def state(self) -> str:
        return self._state

    def is_suspended(self) -> bool:
        return self._state == STATE_SUSPENDED

    def is_healthy(self) -> bool:
        return self.connected and self._missed_heartbeats == 0

    def _set_state(self, state: str):
        if state == self._state:
            return
        self._state = state
        logger.osc(f"Audio {state}")
        self.state_changed.emit(state)

    def _ensure_client(self):
        if self.client is None:
            self.client = udp_client.SimpleUDPClient(self.host, self.port)
        return self.client

    # === Resume (unverified) ===

    def resume(self):
        """
        Ask the server to run and mark the bridge running, without waiting.

        Raises OSError if the socket cannot be opened or the send fails;
        the bridge then stays suspended.
        """
        self._ensure_client().send_message(OSC_PATHS['resume'], [1])
        self._set_state(STATE_RUNNING)
        logger.info(f"Audio resumed ({self.host}:{self.port})", component="OSC")

    # === Connect (verified) ===

    def connect(self, host=None, port=None) -> bool:
        """Open the reply server, ping SuperCollider and start the heartbeat."""
        if host:
            self.host = host
        if port:
            self.port = port

        try:
            self._open_reply_server()
            self.client = udp_client.SimpleUDPClient(self.host, self.port)
            answered = self._ping()
        except OSError as e:
            logger.error(f"Failed to connect: {e}", component="OSC")
            self._teardown()
            return False

        if not answered:
            self._teardown()
            logger.error(f"SuperCollider not responding on port {self.port}", component="OSC")
            logger.info("Run supercollider/echo_tone.scd in sclang, then connect again", component="OSC")
            return False

        self.connected = True
        self._missed_heartbeats = 0
        self._heartbeat_received = True
        self._set_state(STATE_RUNNING)

        if self._heartbeat_timer is None:
            self._heartbeat_timer = QTimer(self)
            self._heartbeat_timer.timeout.connect(self._check_heartbeat)
        self._heartbeat_timer.start(self.HEARTBEAT_INTERVAL_MS)

        logger.info(f"Connected to SuperCollider at {self.host}:{self.port}", component="OSC")
        return True

    def disconnect(self):
        self._teardown()
        logger.info("Disconnected from SuperCollider", component="OSC")

    def _ping(self) -> bool:
        self._pong.clear()
        self.client.send_message(OSC_PATHS['ping'], [1])
        return self._pong.wait(self.PING_TIMEOUT_MS / 1000.0)

    def _check_heartbeat(self):
        """Timer slot: count a miss if the last heartbeat went unanswered, then send another."""
        if not self.connected or self.client is None:
            return

        if self._heartbeat_received:
            if self._missed_heartbeats:
                logger.info("Heartbeat back", component="OSC")
            self._missed_heartbeats = 0
        else:
            self._missed_heartbeats += 1
            if self._missed_heartbeats >= self.HEARTBEAT_MISS_LIMIT:
                logger.error(f"Connection lost after {self._missed_heartbeats} missed heartbeats",
                             component="OSC")
                self.connected = False
                self._heartbeat_timer.stop()
                self._set_state(STATE_SUSPENDED)
                self.connection_lost.emit()
                return

        self._heartbeat_received = False
        try:
            self.client.send_message(OSC_PATHS['heartbeat'], [1])
        except OSError as e:
            logger.warning("Heartbeat send failed", component="OSC", details=str(e))

    # === Reply server (runs on its own thread) ===

    def _open_reply_server(self):
        self._close_reply_server()
        dispatcher = Dispatcher()
        dispatcher.map(OSC_PATHS['pong'], self._handle_pong)
        dispatcher.map(OSC_PATHS['heartbeat_ack'], self._handle_heartbeat_ack)
        dispatcher.set_default_handler(self._handle_unknown)

        self._reply_server = ThreadingOSCUDPServer((OSC_HOST, OSC_RECEIVE_PORT), dispatcher)
        threading.Thread(target=self._reply_server.serve_forever, daemon=True).start()
        logger.osc(f"Listening for replies on {OSC_RECEIVE_PORT}")

    def _close_reply_server(self):
        if self._reply_server is None:
            return
        self._reply_server.shutdown()
        self._reply_server.server_close()
        self._reply_server = None

    def _handle_pong(self, address, *args):
        self._pong.set()

    def _handle_heartbeat_ack(self, address, *args):
        self._heartbeat_received = True

    def _handle_unknown(self, address, *args):
        logger.osc(f"Unhandled message {address}", details=str(args))

    def _teardown(self):
        if self._heartbeat_timer is not None:
            self._heartbeat_timer.stop()
        self._close_reply_server()
        self.client = None
        self.connected = False
        self._set_state(STATE_SUSPENDED)

    # === Outgoing ===

    def send_tone(self, frequency, gain, duration, stop_after, floor):
        """One /echo/tone message. Dropped (debug log) while there is no client."""
        if self.client is None:
            logger.osc("Tone dropped, no audio client")
            return
        self.client.send_message(OSC_PATHS['tone'], [
            float(frequency), float(gain), float(duration), float(stop_after), float(floor),
        ])

    def send_master_volume(self, volume):
        if self.client is not None:
            self.client.send_message(OSC_PATHS['master_volume'], [float(volume)])
