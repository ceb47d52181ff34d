import unittest

import pytest

from afrilex.viewport import (
    DEFAULT_SCALE, MAX_SCALE, MIN_SCALE, RESET_DURATION_MS, ZOOM_DURATION_MS, Viewport,
)


class TestViewport(unittest.TestCase):

    def setUp(self):
        self.viewport = Viewport(800, 600)

    def test_starts_centered(self):
        self.assertEqual((self.viewport.tx, self.viewport.ty), (400, 300))
        self.assertEqual(self.viewport.scale, DEFAULT_SCALE)

    def test_reset_after_pan_and_zoom(self):
        self.viewport.pan_by(120, -45)
        self.viewport.zoom_at(2.5, 10, 20)
        self.viewport.reset()
        self.viewport.finish()
        self.assertEqual(self.viewport.scale, DEFAULT_SCALE)
        self.assertEqual(self.viewport.world_to_screen(0, 0), (400, 300))

    def test_reset_is_animated(self):
        self.viewport.pan_by(200, 200)
        self.viewport.reset()
        self.assertTrue(self.viewport.is_animating)
        self.assertEqual(self.viewport.tx, 600)

        self.viewport.advance(RESET_DURATION_MS / 2)
        self.assertTrue(400 < self.viewport.tx < 600)
        self.assertTrue(self.viewport.is_animating)

        self.viewport.advance(RESET_DURATION_MS / 2)
        self.assertFalse(self.viewport.is_animating)
        self.assertEqual((self.viewport.tx, self.viewport.ty), (400, 300))

    def test_reset_uses_current_size(self):
        self.viewport.resize(1000, 400)
        self.viewport.reset()
        self.viewport.advance(RESET_DURATION_MS)
        self.assertEqual((self.viewport.tx, self.viewport.ty), (500, 200))

    def test_zoom_in_then_out_returns_to_default(self):
        self.viewport.zoom_in()
        self.viewport.advance(ZOOM_DURATION_MS)
        self.assertGreater(self.viewport.scale, DEFAULT_SCALE)
        self.viewport.zoom_out()
        self.viewport.advance(ZOOM_DURATION_MS)
        self.assertEqual(self.viewport.scale, pytest.approx(DEFAULT_SCALE))
        self.assertEqual(self.viewport.tx, pytest.approx(400))

    def test_zoom_steps_chain_while_animating(self):
        self.viewport.zoom_in()
        self.viewport.zoom_in()
        self.viewport.finish()
        self.assertEqual(self.viewport.scale, pytest.approx(DEFAULT_SCALE * 1.3 * 1.3))

    def test_zoom_in_keeps_canvas_center_fixed(self):
        self.viewport.pan_by(30, 40)
        before = self.viewport.screen_to_world(400, 300)
        self.viewport.zoom_in()
        self.viewport.finish()
        after = self.viewport.screen_to_world(400, 300)
        self.assertEqual(after, pytest.approx(before))

    def test_zoom_clamps(self):
        for _ in range(20):
            self.viewport.zoom_in()
        self.viewport.finish()
        self.assertEqual(self.viewport.scale, MAX_SCALE)

        for _ in range(40):
            self.viewport.zoom_out()
        self.viewport.finish()
        self.assertEqual(self.viewport.scale, MIN_SCALE)

        self.viewport.zoom_at(1e6, 0, 0)
        self.assertEqual(self.viewport.scale, MAX_SCALE)
        self.viewport.zoom_at(1e-6, 0, 0)
        self.assertEqual(self.viewport.scale, MIN_SCALE)

    def test_zoom_at_keeps_anchor_fixed(self):
        before = self.viewport.screen_to_world(150, 220)
        self.viewport.zoom_at(1.7, 150, 220)
        self.assertEqual(self.viewport.screen_to_world(150, 220), pytest.approx(before))
        self.assertFalse(self.viewport.is_animating)

    def test_wheel_direction(self):
        self.viewport.wheel(120, 400, 300)
        self.assertGreater(self.viewport.scale, DEFAULT_SCALE)
        self.viewport.wheel(-240, 400, 300)
        self.assertLess(self.viewport.scale, DEFAULT_SCALE)

    def test_pointer_gesture_interrupts_animation(self):
        self.viewport.reset()
        self.viewport.pan_by(10, 0)
        self.assertFalse(self.viewport.is_animating)
        self.assertFalse(self.viewport.advance(16))

    def test_screen_world_roundtrip(self):
        self.viewport.zoom_at(1.9, 33, 44)
        self.viewport.pan_by(-12, 7)
        sx, sy = self.viewport.world_to_screen(-80, 125)
        self.assertEqual(self.viewport.screen_to_world(sx, sy), pytest.approx((-80, 125)))
