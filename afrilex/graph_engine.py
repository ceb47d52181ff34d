import logging
import math
import random

from afrilex.graph_builder import is_strong

logger = logging.getLogger(__name__)


class Node:
    def __init__(self, uid, label, data=None, radius=20):
        self.uid = uid
        self.label = label
        self.data = data or {}
        self.radius = radius
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0
        # Pinned position. When set, forces never move the node.
        self.fx = None
        self.fy = None

    @property
    def pinned(self):
        return self.fx is not None

    def pin(self, x, y):
        self.fx = x
        self.fy = y

    def unpin(self):
        self.fx = None
        self.fy = None


class GraphEngine:
    """Force-directed layout advanced one tick at a time by the host loop.

    The agitation model is d3-force's: `alpha` decays geometrically toward
    `alpha_target`, and every force is scaled by it except collision.
    """

    def __init__(self, seed=None):
        self.nodes = {}  # uid -> Node
        self.edges = []  # (uid1, uid2, weight)
        self.random = random.Random(seed)

        # Link force, keyed off edge weight tier
        self.strong_distance = 40.0
        self.strong_strength = 0.8
        self.weak_distance = 250.0
        self.weak_strength = 0.05

        # Many-body repulsion
        self.charge = -350.0
        self.charge_distance_min2 = 1.0

        # Collision
        self.collide_margin = 10.0
        self.collide_iterations = 2
        self.collide_strength = 1.0

        # Centering toward the logical origin
        self.center_strength = 0.04

        # Agitation
        self.alpha = 1.0
        self.alpha_min = 0.001
        self.alpha_decay = 1 - math.pow(self.alpha_min, 1 / 300)
        self.alpha_target = 0.0
        self.reheat_alpha = 0.3
        self.velocity_decay = 0.4

        self.running = False
        self._degree = {}

    @property
    def is_running(self):
        return self.running

    @property
    def is_settled(self):
        return self.alpha < self.alpha_min and self.alpha_target < self.alpha_min

    def load_from_networkx(self, nx_graph):
        """Replaces the simulated graph. Any previous run is stopped first."""
        self.stop()
        self.nodes = {}
        self.edges = []
        self._degree = {}

        for i, (n, data) in enumerate(nx_graph.nodes(data=True)):
            node = Node(n, data.get("word", str(n)), data, data.get("radius", 20))
            # Phyllotaxis seeding, same as d3
            r = 10 * math.sqrt(0.5 + i)
            angle = i * math.pi * (3 - math.sqrt(5))
            node.x = r * math.cos(angle)
            node.y = r * math.sin(angle)
            self.nodes[n] = node
            self._degree[n] = 0

        for u, v, data in sorted(nx_graph.edges(data=True), key=lambda e: e[2].get("seq", 0)):
            if u in self.nodes and v in self.nodes:
                self.edges.append((u, v, data.get("weight", 1)))
                self._degree[u] += 1
                self._degree[v] += 1

        logger.info("Loaded %d nodes and %d edges into the layout", len(self.nodes), len(self.edges))
        self.alpha = 1.0
        self.alpha_target = 0.0
        self.start()

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def reheat(self):
        """Keeps the layout agitated while a node is being dragged."""
        self.alpha_target = self.reheat_alpha
        if self.alpha < self.alpha_min:
            self.alpha = self.alpha_min
        self.start()

    def cool(self):
        # Let alpha decay naturally from wherever it is
        self.alpha_target = 0.0

    def tick(self):
        """Runs one full force-and-integration pass. Returns False if idle."""
        if not self.running or self.is_settled:
            return False

        self.alpha += (self.alpha_target - self.alpha) * self.alpha_decay

        node_items = list(self.nodes.values())

        # 1. Links
        self._apply_links()

        # 2. Repulsion (All vs All)
        # O(N^2) is fine for a few dozen translations
        self._apply_charge(node_items)

        # 3. Collision
        self._apply_collision(node_items)

        # 4. Center gravity (pull to 0,0)
        k = self.center_strength * self.alpha
        for n in node_items:
            n.vx -= n.x * k
            n.vy -= n.y * k

        # 5. Integration
        keep = 1 - self.velocity_decay
        for n in node_items:
            if n.fx is None:
                n.vx *= keep
                n.x += n.vx
            else:
                n.x = n.fx
                n.vx = 0.0
            if n.fy is None:
                n.vy *= keep
                n.y += n.vy
            else:
                n.y = n.fy
                n.vy = 0.0

        if self.is_settled:
            logger.debug("Layout settled")
        return True

    def _jiggle(self):
        return (self.random.random() - 0.5) * 1e-6

    def _apply_links(self):
        for u, v, weight in self.edges:
            source = self.nodes[u]
            target = self.nodes[v]
            if is_strong(weight):
                distance, strength = self.strong_distance, self.strong_strength
            else:
                distance, strength = self.weak_distance, self.weak_strength

            dx = target.x + target.vx - source.x - source.vx or self._jiggle()
            dy = target.y + target.vy - source.y - source.vy or self._jiggle()
            dist = math.sqrt(dx * dx + dy * dy)
            f = (dist - distance) / dist * self.alpha * strength
            dx *= f
            dy *= f

            # Move the lower-degree endpoint more
            bias = self._degree[u] / (self._degree[u] + self._degree[v])
            target.vx -= dx * bias
            target.vy -= dy * bias
            source.vx += dx * (1 - bias)
            source.vy += dy * (1 - bias)

    def _apply_charge(self, node_items):
        for i in range(len(node_items)):
            n1 = node_items[i]
            for j in range(i + 1, len(node_items)):
                n2 = node_items[j]

                dx = n2.x - n1.x or self._jiggle()
                dy = n2.y - n1.y or self._jiggle()
                dist_sq = dx * dx + dy * dy
                if dist_sq < self.charge_distance_min2:
                    dist_sq = math.sqrt(self.charge_distance_min2 * dist_sq)

                # Negative charge pushes n1 away from n2 and vice versa
                f = self.charge * self.alpha / dist_sq
                n1.vx += dx * f
                n1.vy += dy * f
                n2.vx -= dx * f
                n2.vy -= dy * f

    def _apply_collision(self, node_items):
        # Several passes, a single one under-corrects dense packings
        for _ in range(self.collide_iterations):
            for i in range(len(node_items)):
                n1 = node_items[i]
                r1 = n1.radius + self.collide_margin
                x1 = n1.x + n1.vx
                y1 = n1.y + n1.vy
                for j in range(i + 1, len(node_items)):
                    n2 = node_items[j]
                    r2 = n2.radius + self.collide_margin
                    r = r1 + r2
                    dx = x1 - n2.x - n2.vx
                    dy = y1 - n2.y - n2.vy
                    dist_sq = dx * dx + dy * dy
                    if dist_sq >= r * r:
                        continue
                    if dx == 0:
                        dx = self._jiggle()
                        dist_sq += dx * dx
                    if dy == 0:
                        dy = self._jiggle()
                        dist_sq += dy * dy
                    dist = math.sqrt(dist_sq)
                    overlap = (r - dist) / dist * self.collide_strength
                    dx *= overlap
                    dy *= overlap
                    # Larger node moves less
                    share = (r2 * r2) / (r1 * r1 + r2 * r2)
                    n1.vx += dx * share
                    n1.vy += dy * share
                    n2.vx -= dx * (1 - share)
                    n2.vy -= dy * (1 - share)
