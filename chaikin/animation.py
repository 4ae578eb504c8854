"""Editing and animation state for the Chaikin viewer."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import pygame

from chaikin.curve import Point, apply_chaikin

BACKGROUND = (26, 26, 26)
RED = (230, 41, 56)
BLUE = (0, 120, 242)
GREEN = (0, 227, 48)
WHITE = (255, 255, 255)

ITERATIONS = 7
RATIO = 0.25

DRAWING_HELP = (
    "Click to add points. Press Enter to start animation. "
    "Press R to reset. Press Escape to quit."
)
ANIMATING_HELP = "Space to pause/resume. Press R to reset. Press Escape to quit."


class AppState(enum.Enum):
    """What the application is currently doing."""

    DRAWING = "drawing"
    ANIMATING = "animating"
    PAUSED = "paused"


@dataclass
class AnimationManager:
    """Holds the control points and steps through the smoothing stages."""

    points: list[Point] = field(default_factory=list)
    state: AppState = AppState.DRAWING
    animation_steps: list[list[Point]] = field(default_factory=list)
    current_step: int = 0
    animation_timer: float = 0.0
    animation_speed: float = 0.5
    dragging_point_index: int | None = None
    drag_threshold: float = 10.0

    def add_point(self, position) -> None:
        """Append a control point."""
        x, y = position
        self.points.append((float(x), float(y)))

    def start_animation(self) -> None:
        """Compute all smoothing stages and start playing, given three or more points."""
        if len(self.points) >= 3:
            self.animation_steps = apply_chaikin(self.points, ITERATIONS, RATIO)
            self.current_step = 0
            self.animation_timer = 0.0
            self.state = AppState.ANIMATING

    def toggle_animation_pause(self) -> None:
        """Switch between playing and paused; does nothing while drawing."""
        if self.state is AppState.ANIMATING:
            self.state = AppState.PAUSED
        elif self.state is AppState.PAUSED:
            self.state = AppState.ANIMATING

    def update(self, dt: float) -> None:
        """Advance the animation clock by ``dt`` seconds."""
        if self.state is not AppState.ANIMATING:
            return
        self.animation_timer += dt
        if self.animation_timer >= self.animation_speed:
            self.animation_timer = 0.0
            self.current_step = (self.current_step + 1) % len(self.animation_steps)

    def draw(self, surface, font) -> None:
        """Render the current state onto ``surface`` using ``font`` for text."""
        surface.fill(BACKGROUND)

        if self.state is AppState.DRAWING:
            for point in self.points:
                pygame.draw.circle(surface, RED, point, 5)
            if len(self.points) >= 2:
                for start, end in zip(self.points, self.points[1:]):
                    pygame.draw.line(surface, WHITE, start, end, 2)
                if len(self.points) >= 3:
                    pygame.draw.line(surface, WHITE, self.points[-1], self.points[0], 2)
            surface.blit(font.render(DRAWING_HELP, True, WHITE), (20, 20))
            return

        current = self.animation_steps[self.current_step]
        for point in current:
            pygame.draw.circle(surface, BLUE, point, 3)
        if len(current) >= 2:
            for start, end in zip(current, current[1:]):
                pygame.draw.line(surface, GREEN, start, end, 2)
            pygame.draw.line(surface, GREEN, current[-1], current[0], 2)

        surface.blit(font.render(self.status_text(), True, WHITE), (20, 20))
        surface.blit(font.render(ANIMATING_HELP, True, WHITE), (20, 50))

    def status_text(self) -> str:
        """Describe the animation position, e.g. ``Step: 2/7 (Playing)``."""
        status = "PAUSED" if self.state is AppState.PAUSED else "Playing"
        return f"Step: {self.current_step}/{len(self.animation_steps) - 1} ({status})"

    def start_dragging(self, mouse_pos) -> None:
        """Pick up the control point nearest ``mouse_pos``, if one is close enough."""
        if self.state is AppState.DRAWING:
            self.dragging_point_index = self.find_closest_point(mouse_pos)

    def update_dragging(self, mouse_pos) -> None:
        """Move the point being dragged to ``mouse_pos``."""
        if self.dragging_point_index is not None:
            x, y = mouse_pos
            self.points[self.dragging_point_index] = (float(x), float(y))

    def stop_dragging(self) -> None:
        """Release the dragged point."""
        self.dragging_point_index = None

    def find_closest_point(self, mouse_pos) -> int | None:
        """Index of the nearest point within ``drag_threshold``, or None."""
        candidates = [
            (distance, index)
            for index, point in enumerate(self.points)
            if (distance := math.dist(point, mouse_pos)) <= self.drag_threshold
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda item: item[0])[1]

    def reset(self) -> None:
        """Clear all points and return to drawing."""
        self.points.clear()
        self.animation_steps.clear()
        self.current_step = 0
        self.animation_timer = 0.0
        self.state = AppState.DRAWING