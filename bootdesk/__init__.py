"""C-style sprintf, rand and strcmp helpers and a 16-colour palette desktop renderer."""

__version__ = "0.1.0"
__all__ = ["formatting", "rand", "strings", "graphics"]