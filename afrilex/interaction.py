import enum
import logging

logger = logging.getLogger(__name__)


class Gesture(enum.Enum):
    IDLE = "idle"
    DRAGGING_NODE = "dragging_node"
    PANNING = "panning"


class InteractionHandler:
    """Turns pointer events (screen coordinates) into node drags or camera moves.

    A press on a node drags that node; a press on empty canvas pans. Missing
    or duplicated events never raise.
    """

    def __init__(self, engine, viewport):
        self.engine = engine
        self.viewport = viewport
        self.state = Gesture.IDLE
        self.dragging_uid = None
        self.drag_origin = None  # pre-drag (x, y) of the dragged node
        self.last_pos = None

    def node_at(self, sx, sy):
        wx, wy = self.viewport.screen_to_world(sx, sy)
        # Last drawn is on top
        for node in reversed(list(self.engine.nodes.values())):
            dx = wx - node.x
            dy = wy - node.y
            if dx * dx + dy * dy <= node.radius * node.radius:
                return node
        return None

    def press(self, sx, sy):
        """Starts a gesture. Returns the node under the pointer, if any."""
        if self.state is not Gesture.IDLE:
            self.release()

        node = self.node_at(sx, sy)
        self.last_pos = (sx, sy)
        if node is None:
            self.state = Gesture.PANNING
            return None

        self.state = Gesture.DRAGGING_NODE
        self.dragging_uid = node.uid
        self.drag_origin = (node.x, node.y)
        node.pin(*self.viewport.screen_to_world(sx, sy))
        self.engine.reheat()
        logger.debug("Dragging %s from %.1f, %.1f", node.uid, node.x, node.y)
        return node

    def move(self, sx, sy):
        if self.state is Gesture.PANNING:
            lx, ly = self.last_pos
            self.viewport.pan_by(sx - lx, sy - ly)
        elif self.state is Gesture.DRAGGING_NODE:
            node = self.engine.nodes.get(self.dragging_uid)
            if node is None:
                # Graph was rebuilt under the pointer
                self.cancel()
                return
            node.pin(*self.viewport.screen_to_world(sx, sy))
        self.last_pos = (sx, sy)

    def release(self):
        if self.state is Gesture.DRAGGING_NODE:
            node = self.engine.nodes.get(self.dragging_uid)
            if node is not None:
                node.unpin()
            self.engine.cool()
        self._clear()

    def wheel(self, angle_delta, sx, sy):
        self.viewport.wheel(angle_delta, sx, sy)

    def cancel(self):
        """Drops the current gesture without touching any node."""
        if self.state is Gesture.DRAGGING_NODE:
            self.engine.cool()
        self._clear()

    def _clear(self):
        self.state = Gesture.IDLE
        self.dragging_uid = None
        self.drag_origin = None
        self.last_pos = None
