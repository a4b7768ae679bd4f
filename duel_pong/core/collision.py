"""
Collision detection system for Duel Pong
"""

from duel_pong.core.entities import Ball, Paddle

Rect = tuple[float, float, float, float]


def aabb_overlap(rect_a: Rect, rect_b: Rect) -> bool:
    """Checks if two (x, y, width, height) rectangles overlap

    Edges that only touch do not count as an overlap.
    """
    ax, ay, aw, ah = rect_a
    bx, by, bw, bh = rect_b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class CollisionDetector:
    """Collision detector between the ball and the paddles"""

    def ball_hits_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Checks if the ball's bounding square overlaps the paddle"""
        return aabb_overlap(ball.get_rect(), paddle.get_rect())
