from .hull import HullResult, convex_hull

__all__ = ["HullResult", "convex_hull"]
