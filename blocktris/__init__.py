"""Terminal drawing, menus, scenes, scoring and score storage for a falling-block puzzle game."""

__version__ = "0.1.0"