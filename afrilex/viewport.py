"""Pan/zoom camera for the cognate graph.

Screen coordinates relate to simulated world coordinates by
``screen = world * k + (tx, ty)``.
"""

MIN_SCALE = 0.1
MAX_SCALE = 4.0
DEFAULT_SCALE = 0.8
ZOOM_STEP = 1.3
WHEEL_RATE = 0.002

RESET_DURATION_MS = 750
ZOOM_DURATION_MS = 300


def clamp_scale(k):
    return max(MIN_SCALE, min(MAX_SCALE, k))


def ease_cubic_in_out(t):
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


class _Animation:
    def __init__(self, start, end, duration):
        self.start = start
        self.end = end
        self.duration = duration
        self.elapsed = 0.0

    @property
    def done(self):
        return self.elapsed >= self.duration

    def value(self):
        t = ease_cubic_in_out(min(1.0, self.elapsed / self.duration))
        return tuple(a + (b - a) * t for a, b in zip(self.start, self.end))


class Viewport:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.tx = width / 2
        self.ty = height / 2
        self.k = DEFAULT_SCALE
        self._animation = None

    @property
    def scale(self):
        return self.k

    @property
    def is_animating(self):
        return self._animation is not None

    @property
    def target(self):
        """Transform the viewport is heading to, or the current one."""
        if self._animation:
            return self._animation.end
        return (self.tx, self.ty, self.k)

    def resize(self, width, height):
        self.width = width
        self.height = height

    def screen_to_world(self, sx, sy):
        return (sx - self.tx) / self.k, (sy - self.ty) / self.k

    def world_to_screen(self, wx, wy):
        return wx * self.k + self.tx, wy * self.k + self.ty

    # Animated operations

    def reset(self):
        """Centers the origin in the canvas at the default scale."""
        self._animate_to((self.width / 2, self.height / 2, DEFAULT_SCALE), RESET_DURATION_MS)

    def zoom_in(self):
        self._animate_scale_by(ZOOM_STEP)

    def zoom_out(self):
        self._animate_scale_by(1 / ZOOM_STEP)

    def _animate_scale_by(self, factor):
        # Chain from where a running animation would land
        tx, ty, k = self.target
        transform = self._scaled(tx, ty, k, factor, self.width / 2, self.height / 2)
        self._animate_to(transform, ZOOM_DURATION_MS)

    def _animate_to(self, transform, duration):
        self._animation = _Animation((self.tx, self.ty, self.k), transform, duration)

    def advance(self, dt_ms):
        """Steps a running animation. Returns True if the transform changed."""
        if self._animation is None:
            return False
        self._animation.elapsed += dt_ms
        self.tx, self.ty, self.k = self._animation.value()
        if self._animation.done:
            self.tx, self.ty, self.k = self._animation.end
            self._animation = None
        return True

    def finish(self):
        if self._animation is not None:
            self.tx, self.ty, self.k = self._animation.end
            self._animation = None

    # Immediate, pointer-driven operations

    def pan_by(self, dx, dy):
        self._animation = None
        self.tx += dx
        self.ty += dy

    def zoom_at(self, factor, sx, sy):
        """Zooms around a screen point, keeping it fixed."""
        self._animation = None
        self.tx, self.ty, self.k = self._scaled(self.tx, self.ty, self.k, factor, sx, sy)

    def wheel(self, angle_delta, sx, sy):
        self.zoom_at(2 ** (angle_delta * WHEEL_RATE), sx, sy)

    @staticmethod
    def _scaled(tx, ty, k, factor, sx, sy):
        new_k = clamp_scale(k * factor)
        wx = (sx - tx) / k
        wy = (sy - ty) / k
        return sx - wx * new_k, sy - wy * new_k, new_k
