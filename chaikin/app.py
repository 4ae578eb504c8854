"""Interactive window: click to place points, Enter to watch them smooth."""

from __future__ import annotations

import argparse

import pygame

from chaikin.animation import AnimationManager, AppState

WINDOW_TITLE = "Chaikin's Algorithm"
WINDOW_SIZE = (1024, 768)
FONT_SIZE = 24
FPS = 60


def process_event(manager: AnimationManager, event) -> bool:
    """Apply one pygame event to ``manager``; return False when the app should quit."""
    if event.type == pygame.QUIT:
        return False

    drawing = manager.state is AppState.DRAWING

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if drawing:
            manager.start_dragging(event.pos)
            if manager.dragging_point_index is None:
                manager.add_point(event.pos)
    elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
        if drawing:
            manager.update_dragging(event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        if drawing:
            manager.stop_dragging()
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            manager.toggle_animation_pause()
        elif event.key == pygame.K_RETURN:
            if drawing:
                manager.start_animation()
        elif event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_r:
            manager.reset()
    return True


def run_app() -> None:
    """Open the window and run the event loop until the user quits."""
    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        manager = AnimationManager()
        running = True
        while running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if not process_event(manager, event):
                    running = False
                    break
            if not running:
                break
            manager.update(dt)
            manager.draw(surface, font)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="chaikin",
        description="Draw a polygon and watch Chaikin's algorithm smooth it.",
    )
    parser.parse_args(argv)
    run_app()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())