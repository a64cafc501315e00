"""
Tests for the main window's master-volume handlers.

Handlers are called unbound on a MagicMock stand-in so no window
(and no display) is created.
"""

from unittest.mock import MagicMock

from echocanvas.gui.main_frame import MainFrame


def make_frame(send_error=None):
    frame = MagicMock()
    frame.controller.params.volume = 0.4
    frame.bridge.send_master_volume.side_effect = send_error
    frame._send_master_volume = lambda volume: MainFrame._send_master_volume(frame, volume)
    return frame


class TestMasterVolume:

    def test_running_state_sends_current_volume(self):
        frame = make_frame()
        MainFrame.on_audio_state(frame, "running")
        frame.bridge.send_master_volume.assert_called_once_with(0.4)
        frame.control_panel.set_audio_state.assert_called_once_with("running")

    def test_suspended_state_sends_nothing(self):
        frame = make_frame()
        MainFrame.on_audio_state(frame, "suspended")
        frame.bridge.send_master_volume.assert_not_called()

    def test_send_failure_on_running_is_swallowed(self):
        frame = make_frame(send_error=OSError("unreachable"))
        MainFrame.on_audio_state(frame, "running")
        frame.control_panel.set_audio_state.assert_called_once_with("running")

    def test_send_failure_on_parameter_change_is_swallowed(self):
        frame = make_frame(send_error=OSError("unreachable"))
        MainFrame.on_parameters_changed(frame, {"base_pitch": 440.0, "volume": 0.2, "decay_time": 1.2})
        frame.control_panel.set_parameters.assert_called_once()
        frame.bridge.send_master_volume.assert_called_once_with(0.2)
