import logging
import random

from mathlite import (
    Vec2,
    closest_point_on_line_segment,
    distance_squared,
    get_integrator,
    random_in_unit_disk,
    real,
)

logger = logging.getLogger(__name__)

# inward facing wall normals
WALL_LEFT = Vec2.right()
WALL_RIGHT = Vec2.left()
WALL_TOP = Vec2.up()        # screen space: y grows downwards
WALL_BOTTOM = Vec2.down()


class Projectile:
    def __init__(self, pos, vel=None, radius=6):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2.zero()
        self.radius = radius

    def __repr__(self):
        return f"Projectile(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), radius={self.radius})"


class Sandbox:
    def __init__(self, width, height, gravity=Vec2(0, 981), restitution=0.5, integrator='euler'):
        self.width = width
        self.height = height
        self.gravity = gravity.copy()
        self.restitution = restitution
        self.projectiles = []

        self.integrator_name = integrator
        self._integrate = get_integrator(integrator)

    def set_integrator(self, name):
        self._integrate = get_integrator(name)
        self.integrator_name = name
        logger.debug("sandbox integrator set to %s", name)

    def add_projectile(self, projectile):
        self.projectiles.append(projectile)

    def launch(self, origin, target, speed, spread=0.0, rng=None, radius=6):
        """
        Fire a projectile from `origin` towards `target`. The aim is jittered
        by a random point in the unit disk scaled by `spread`.
        """
        direction = (target - origin).normalize()
        if spread > 0.0:
            rng = rng or random.Random()
            direction = (direction + random_in_unit_disk(rng) * spread).normalize()
        if direction.is_zero():
            # straight up on screen
            direction = Vec2.down()
        projectile = Projectile(origin, direction * speed, radius=radius)
        self.add_projectile(projectile)
        logger.debug("launched %r", projectile)
        return projectile

    def clear(self):
        self.projectiles = []

    def update(self, dt):
        for p in self.projectiles:
            self._integrate(p.pos, p.vel, self.gravity, dt)
            self._apply_walls(p)

    def _apply_walls(self, p):
        # Positional clamp first, then bounce the velocity off the wall normal.
        if p.pos.x < p.radius:
            p.pos.x = real(p.radius)
            self._bounce(p, WALL_LEFT)
        elif p.pos.x > self.width - p.radius:
            p.pos.x = real(self.width - p.radius)
            self._bounce(p, WALL_RIGHT)

        if p.pos.y < p.radius:
            p.pos.y = real(p.radius)
            self._bounce(p, WALL_TOP)
        elif p.pos.y > self.height - p.radius:
            p.pos.y = real(self.height - p.radius)
            self._bounce(p, WALL_BOTTOM)

    def _bounce(self, p, normal):
        # only reflect when moving into the wall
        if p.vel.dot(normal) >= 0.0:
            return
        reflected = p.vel.reflect(normal)
        along = reflected.project(normal)
        # restitution damps the normal component only
        p.vel = reflected - along + along * self.restitution

    @staticmethod
    def nearest_segment(point, segments, max_distance):
        """
        Return (index, closest_point) of the segment nearest to `point`,
        or (None, None) when none is within `max_distance`.
        """
        best = None
        best_point = None
        best_d2 = max_distance * max_distance
        for i, (a, b) in enumerate(segments):
            if a == b:
                continue
            q = closest_point_on_line_segment(a, b, point)
            d2 = distance_squared(point, q)
            if d2 <= best_d2:
                best, best_point, best_d2 = i, q, d2
        return best, best_point
