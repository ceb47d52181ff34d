import os
import unittest
from unittest.mock import MagicMock, patch

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QHideEvent
from PyQt6.QtWidgets import QApplication

from afrilex.graph_builder import build_graph
from afrilex.graph_engine import GraphEngine
from afrilex.interaction import Gesture
from afrilex.models import TranslationRecord
from afrilex.ui.graph_widget import GraphWidget
from afrilex.ui.preferences import PreferencesDialog


def make_graph():
    records = [
        TranslationRecord(language="Coptic", translated_word="mou", similarity_group=1),
        TranslationRecord(language="Wolof", translated_word="ndox", similarity_group=2),
    ]
    return build_graph(records, "water")


def mouse_event(button):
    event = MagicMock()
    event.button.return_value = button
    return event


def pinch_event(value, x, y):
    event = MagicMock()
    event.type.return_value = QEvent.Type.NativeGesture
    event.gestureType.return_value = Qt.NativeGestureType.ZoomNativeGesture
    event.value.return_value = value
    event.position.return_value = QPointF(x, y)
    return event


class QtTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])


class TestGraphWidget(QtTestCase):

    def setUp(self):
        self.widget = GraphWidget(GraphEngine(seed=1))
        self.widget.set_graph(make_graph())
        # Drawn last, so nothing covers it
        self.node = list(self.widget.engine.nodes.values())[-1]

    def tearDown(self):
        self.widget.timer.stop()
        self.widget.deleteLater()

    def press_node(self):
        sx, sy = self.widget.viewport.world_to_screen(self.node.x, self.node.y)
        self.widget.interaction.press(sx, sy)
        self.assertTrue(self.node.pinned)

    def test_hide_mid_drag_unpins(self):
        self.press_node()
        self.widget.hideEvent(QHideEvent())

        self.assertFalse(self.widget.timer.isActive())
        self.assertIs(self.widget.interaction.state, Gesture.IDLE)
        self.assertFalse(self.node.pinned)
        self.assertEqual(self.widget.engine.alpha_target, 0.0)

    def test_non_left_release_keeps_drag(self):
        self.press_node()
        for button in (Qt.MouseButton.RightButton, Qt.MouseButton.MiddleButton):
            self.widget.mouseReleaseEvent(mouse_event(button))
            self.assertIs(self.widget.interaction.state, Gesture.DRAGGING_NODE)
            self.assertTrue(self.node.pinned)

        self.widget.mouseReleaseEvent(mouse_event(Qt.MouseButton.LeftButton))
        self.assertIs(self.widget.interaction.state, Gesture.IDLE)
        self.assertFalse(self.node.pinned)

    def test_pinch_zooms_around_pointer(self):
        viewport = self.widget.viewport
        scales = []
        self.widget.zoomChanged.connect(scales.append)
        k = viewport.scale
        anchor = viewport.screen_to_world(100, 50)

        handled = self.widget.event(pinch_event(0.25, 100, 50))

        self.assertTrue(handled)
        self.assertEqual(viewport.scale, pytest.approx(k * 1.25))
        self.assertEqual(viewport.screen_to_world(100, 50), pytest.approx(anchor))
        self.assertEqual(scales, [viewport.scale])

    def test_pinch_is_clamped(self):
        self.widget.event(pinch_event(50.0, 0, 0))
        self.assertEqual(self.widget.viewport.scale, 4.0)

    def test_other_gestures_fall_through(self):
        event = pinch_event(0.5, 0, 0)
        event.gestureType.return_value = Qt.NativeGestureType.RotateNativeGesture
        k = self.widget.viewport.scale
        with patch("afrilex.ui.graph_widget.QWidget.event", return_value=False) as base:
            self.assertFalse(self.widget.event(event))
        base.assert_called_once_with(event)
        self.assertEqual(self.widget.viewport.scale, k)


class TestPreferencesDialog(QtTestCase):

    def test_defaults_follow_environment(self):
        with patch.dict(os.environ, {"AFRILEX_LANG": "fr", "AFRILEX_THEME": "dark"}, clear=True):
            dialog = PreferencesDialog()
        self.assertEqual(dialog.selection(), ("fr", "Dark"))

    def test_explicit_values_win(self):
        dialog = PreferencesDialog(current_lang="en", current_theme="Dark")
        self.assertEqual(dialog.selection(), ("en", "Dark"))

    def test_unknown_values_fall_back_to_first(self):
        dialog = PreferencesDialog(current_lang="de", current_theme="Neon")
        self.assertEqual(dialog.selection(), ("en", "Light"))

    def test_save_emits_codes_not_labels(self):
        dialog = PreferencesDialog(current_lang="en", current_theme="Light")
        applied = []
        dialog.settings_applied.connect(lambda lang, theme: applied.append((lang, theme)))
        dialog.lang_combo.setCurrentIndex(1)
        dialog.theme_combo.setCurrentIndex(1)

        dialog.on_save()

        self.assertEqual(applied, [("fr", "Dark")])
        self.assertEqual(dialog.result(), PreferencesDialog.DialogCode.Accepted)
