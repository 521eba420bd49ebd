from .diagnostics import bp as diagnostics_bp
from .posts import bp as posts_bp
from .users import bp as users_bp

__all__ = ["users_bp", "posts_bp", "diagnostics_bp"]
