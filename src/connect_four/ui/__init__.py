"""
Pygame presenter: name entry, board rendering, and end-of-match choices.

`layout` holds the display-free geometry; `app` and `widgets` need pygame.
"""
