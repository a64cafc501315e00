"""
Tests for the OSC audio bridge and path consistency with the SC script.
"""

import re
from unittest.mock import MagicMock, patch

import pytest

from echocanvas.audio.audio_bridge import AudioBridge, STATE_RUNNING, STATE_SUSPENDED
from echocanvas.config import OSC_PATHS


class TestOSCPathFormat:

    def test_all_paths_start_with_echo(self):
        for key, path in OSC_PATHS.items():
            assert path.startswith('/echo/'), f"'{key}': '{path}' missing /echo/ prefix"

    def test_no_trailing_slash(self):
        for key, path in OSC_PATHS.items():
            assert not path.endswith('/'), f"'{key}': '{path}' has trailing slash"


class TestOSCPathsInSuperCollider:

    @pytest.fixture
    def sc_content(self, project_root):
        return (project_root / 'supercollider' / 'echo_tone.scd').read_text(encoding='utf-8')

    def test_sent_paths_handled_in_sc(self, sc_content):
        """Every path Python sends has an OSCdef."""
        for key in ('ping', 'heartbeat', 'resume', 'tone', 'master_volume'):
            assert f"'{OSC_PATHS[key]}'" in sc_content, f"{key} not handled in SC"

    def test_reply_paths_sent_by_sc(self, sc_content):
        for key in ('pong', 'heartbeat_ack'):
            assert re.search(rf"sendMsg\('{re.escape(OSC_PATHS[key])}'", sc_content)


class TestBridgeState:

    def test_starts_suspended(self):
        bridge = AudioBridge()
        assert bridge.state == STATE_SUSPENDED
        assert bridge.is_suspended()
        assert not bridge.connected

    @patch('echocanvas.audio.audio_bridge.udp_client.SimpleUDPClient')
    def test_resume_sends_and_runs(self, client_cls):
        bridge = AudioBridge()
        states = []
        bridge.state_changed.connect(states.append)

        bridge.resume()

        client_cls.return_value.send_message.assert_called_once_with(OSC_PATHS['resume'], [1])
        assert bridge.state == STATE_RUNNING
        assert states == [STATE_RUNNING]

    @patch('echocanvas.audio.audio_bridge.udp_client.SimpleUDPClient')
    def test_resume_failure_propagates_and_stays_suspended(self, client_cls):
        client_cls.return_value.send_message.side_effect = OSError("unreachable")
        bridge = AudioBridge()
        with pytest.raises(OSError):
            bridge.resume()
        assert bridge.is_suspended()

    def test_disconnect_returns_to_suspended(self):
        bridge = AudioBridge()
        bridge.client = MagicMock()
        bridge._set_state(STATE_RUNNING)
        bridge.disconnect()
        assert bridge.is_suspended()
        assert bridge.client is None


class TestSendTone:

    def test_tone_message_layout(self):
        bridge = AudioBridge()
        bridge.client = MagicMock()
        bridge.send_tone(440, 0.5, 0.9, 0.95, 0.001)
        bridge.client.send_message.assert_called_once_with(
            OSC_PATHS['tone'], [440.0, 0.5, 0.9, 0.95, 0.001])

    def test_tone_without_client_is_noop(self):
        bridge = AudioBridge()
        bridge.send_tone(440, 0.5, 0.9, 0.95, 0.001)

    def test_master_volume(self):
        bridge = AudioBridge()
        bridge.client = MagicMock()
        bridge.send_master_volume(0.3)
        bridge.client.send_message.assert_called_once_with(OSC_PATHS['master_volume'], [0.3])


class TestHeartbeat:

    def test_missed_heartbeats_drop_connection(self):
        bridge = AudioBridge()
        bridge.client = MagicMock()
        bridge.connected = True
        bridge._heartbeat_timer = MagicMock()
        lost = []
        bridge.connection_lost.connect(lambda: lost.append(True))

        for _ in range(AudioBridge.HEARTBEAT_MISS_LIMIT):
            bridge._check_heartbeat()

        assert lost == [True]
        assert not bridge.connected
        assert bridge.is_suspended()

    def test_ack_keeps_connection_healthy(self):
        bridge = AudioBridge()
        bridge.client = MagicMock()
        bridge.connected = True
        bridge._heartbeat_timer = MagicMock()

        for _ in range(5):
            bridge._handle_heartbeat_ack('/echo/heartbeat_ack', 1)
            bridge._check_heartbeat()

        assert bridge.connected
        assert bridge.is_healthy()
