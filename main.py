import logging
import random

import pygame
from pygame import mouse
from constants import (BLACK, BLUE, DT, FPS, GRAVITY, GREY, HEIGHT, LAUNCH_SPEED, LAUNCH_SPREAD, LAUNCHER_COLOR,
                       LAUNCHER_SIZE, PICK_DISTANCE, PROJECTILE_RADIUS, RED, RESTITUTION, WHITE, WIDTH)
from mathlite import Mat2, Vec2, to_radians
from sandbox import Sandbox

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger(__name__)


def build_segments():
    """A fan of segments around the screen centre, for the picking overlay."""
    centre = Vec2(WIDTH * 0.5, HEIGHT * 0.5)
    arm = Vec2(180.0, 0.0)
    step = Mat2.rotation(to_radians(45.0))
    segments = []
    for _ in range(4):
        segments.append((centre - arm, centre + arm))
        arm = step * arm
    return segments


def draw_projectiles(screen, sandbox):
    for p in sandbox.projectiles:
        pygame.draw.circle(screen, RED, (int(p.pos.x), int(p.pos.y)), p.radius)


def draw_segments(screen, segments, picked=None, picked_point=None):
    for i, (a, b) in enumerate(segments):
        color = BLUE if i == picked else GREY
        pygame.draw.line(screen, color, (int(a.x), int(a.y)), (int(b.x), int(b.y)), 3 if i == picked else 1)
    if picked_point is not None:
        pygame.draw.circle(screen, BLUE, (int(picked_point.x), int(picked_point.y)), 4)


def draw_launcher(screen, origin, target):
    pygame.draw.circle(screen, LAUNCHER_COLOR, (int(origin.x), int(origin.y)), LAUNCHER_SIZE)
    aim = (target - origin).normalize()
    end_pos = origin + aim * 30
    pygame.draw.line(screen, LAUNCHER_COLOR, (int(origin.x), int(origin.y)), (int(end_pos.x), int(end_pos.y)), 2)


def _sync_from_gui(shared, sandbox):
    if shared.get('clear_sandbox', False):
        sandbox.clear()
        shared['clear_sandbox'] = False
    name = shared.get('integrator', sandbox.integrator_name)
    if name != sandbox.integrator_name:
        sandbox.set_integrator(name)
    sandbox.gravity = Vec2(0.0, float(shared.get('gravity', sandbox.gravity.y)))
    sandbox.restitution = float(shared.get('restitution', sandbox.restitution))
    shared['projectile_count'] = len(sandbox.projectiles)


def main():
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("mathlite sandbox")
    clock = pygame.time.Clock()

    sandbox = Sandbox(WIDTH, HEIGHT, gravity=Vec2(0, GRAVITY), restitution=RESTITUTION)
    segments = build_segments()
    launcher = Vec2(40, HEIGHT - 40)
    rng = random.Random()

    running = True
    paused = False
    launch_speed = LAUNCH_SPEED

    font = pygame.font.Font(None, 32)

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    _shared['integrator'] = sandbox.integrator_name
    _shared['gravity'] = GRAVITY
    _shared['restitution'] = RESTITUTION
    _shared['launch_speed'] = LAUNCH_SPEED
    _shared['clear_sandbox'] = False
    _shared['toggle_pause'] = False
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()
    logger.info("sandbox started (%dx%d @ %d fps)", WIDTH, HEIGHT, FPS)

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                sandbox.launch(launcher, Vec2(mx, my), launch_speed, spread=LAUNCH_SPREAD,
                               rng=rng, radius=PROJECTILE_RADIUS)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                launcher = Vec2(*event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_e:
                    sandbox.set_integrator('euler')
                    _shared['integrator'] = 'euler'
                elif event.key == pygame.K_r:
                    sandbox.set_integrator('rk2')
                    _shared['integrator'] = 'rk2'
                elif event.key == pygame.K_c:
                    sandbox.clear()
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_q:
                    running = False

        # --- Handle GUI updates ---
        # the panel runs in another process; a dead manager must not stop the loop
        try:
            if _shared.get('toggle_pause', False):
                paused = not paused
                _shared['toggle_pause'] = False
            if _shared.get('__exit__', False):
                running = False
            launch_speed = float(_shared.get('launch_speed', launch_speed))
            _sync_from_gui(_shared, sandbox)
        except (EOFError, ConnectionError, BrokenPipeError) as exc:
            logger.warning("control panel unavailable: %s", exc)

        # --- Update ---
        if not paused:
            sandbox.update(DT)

        # --- Draw ---
        screen.fill(WHITE)

        mx, my = mouse.get_pos()
        picked, picked_point = Sandbox.nearest_segment(Vec2(mx, my), segments, PICK_DISTANCE)
        draw_segments(screen, segments, picked, picked_point)
        draw_projectiles(screen, sandbox)
        draw_launcher(screen, launcher, Vec2(mx, my))

        if paused:
            pause_text = font.render("PAUSED", True, BLACK)
            screen.blit(pause_text, (WIDTH - pause_text.get_width() - 10, 10))

        status = font.render(f"{sandbox.integrator_name}  projectiles: {len(sandbox.projectiles)}", True, BLACK)
        screen.blit(status, (10, HEIGHT - 30))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    try:
        _shared['__exit__'] = True
        _gui_proc.join(timeout=1.0)
    except (EOFError, ConnectionError, BrokenPipeError) as exc:
        logger.warning("control panel did not shut down cleanly: %s", exc)

    logger.info("sandbox stopped")
    pygame.quit()


if __name__ == "__main__":
    main()
