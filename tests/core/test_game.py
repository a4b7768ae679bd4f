"""
Unit tests for the game controller

Tests game controller functionality including:
- Pause gating of the update step
- Paddle control from the keyboard state
- Paddle bounces and bounce angle
- Scoring and ball reset
- Draw pass order
"""

import numpy as np
import pytest

from duel_pong.core.entities import Vector2D
from duel_pong.core.game import GameStatus, PongGame
from duel_pong.core.renderer import Renderer
from duel_pong.utils.config import game_config_tmp

DRAW_PASS = [
    "clear_rect",
    "stroke_dashed_line",
    "fill_rect",
    "fill_rect",
    "fill_arc",
    "fill_text",
    "fill_text",
]


@pytest.fixture
def running_game(game):
    game.toggle_pause()
    return game


class TestGameSetup:
    """Test the initial state of a game"""

    def test_initialization(self, game):
        """Test entities are placed like a fresh game"""
        assert game.status == GameStatus.PAUSED
        assert game.is_paused
        assert game.left_paddle.position.to_tuple() == (20, 250)
        assert game.right_paddle.position.to_tuple() == (770, 250)
        assert game.ball.position.to_tuple() == (400, 300)
        assert game.left_player_score == 0
        assert game.right_player_score == 0

    def test_get_game_state(self, game):
        """Test the state snapshot"""
        state = game.get_game_state()
        assert state["ball_position"] == (400, 300)
        assert state["ball_velocity"][0] in {-2, 2}
        assert state["left_paddle_position"] == (20, 250)
        assert state["right_paddle_position"] == (770, 250)
        assert state["score"] == (0, 0)
        assert state["status"] == "paused"
        assert state["field_bounds"] == (0, 800, 0, 600)


class TestPause:
    """Test the paused/running state machine"""

    def test_toggle_pause(self, game):
        """Test toggling goes back and forth"""
        assert game.toggle_pause() is False
        assert game.status == GameStatus.RUNNING
        assert game.toggle_pause() is True
        assert game.status == GameStatus.PAUSED

    def test_paused_update_changes_nothing(self, game, input_state):
        """Test repeated updates while paused leave the scene frozen"""
        input_state.press("w")
        input_state.press("ArrowDown")
        game.ball.position = Vector2D(-1, 300)
        before = game.get_game_state()

        for _ in range(100):
            events = game.update()
            assert events == {"wall_bounces": 0, "paddle_hits": [], "goals": []}

        assert game.get_game_state() == before

    def test_paused_game_still_draws(self, game, recording_surface):
        """Test draw renders the frozen scene every frame"""
        game.ball.position = Vector2D(100, 200)
        game.step()
        game.step()

        assert recording_surface.names() == DRAW_PASS * 2
        arc = [call for call in recording_surface.calls if call[0] == "fill_arc"]
        assert arc[0][1:3] == (107.5, 207.5)
        assert arc[1][1:3] == (107.5, 207.5)

    def test_resume_after_pause(self, running_game):
        """Test physics continue after a pause/resume cycle"""
        running_game.ball.velocity = Vector2D(2, 2)
        running_game.toggle_pause()
        running_game.update()
        assert running_game.ball.position.to_tuple() == (400, 300)

        running_game.toggle_pause()
        running_game.update()
        assert running_game.ball.position.to_tuple() == (402, 302)


class TestInput:
    """Test paddle control"""

    def test_left_paddle_keys(self, running_game, input_state):
        """Test w and s move the left paddle"""
        input_state.press("w")
        running_game.update()
        assert running_game.left_paddle.position.y == 244

        input_state.release("w")
        input_state.press("s")
        running_game.update()
        running_game.update()
        assert running_game.left_paddle.position.y == 256
        assert running_game.right_paddle.position.y == 250

    def test_right_paddle_keys(self, running_game, input_state):
        """Test arrow keys move the right paddle"""
        input_state.press("ArrowUp")
        running_game.update()
        assert running_game.right_paddle.position.y == 244

        input_state.release("ArrowUp")
        input_state.press("ArrowDown")
        running_game.update()
        assert running_game.right_paddle.position.y == 250
        assert running_game.left_paddle.position.y == 250

    def test_both_paddles_same_frame(self, running_game, input_state):
        """Test both players move in the same frame"""
        input_state.press("w")
        input_state.press("ArrowDown")
        running_game.update()
        assert running_game.left_paddle.position.y == 244
        assert running_game.right_paddle.position.y == 256

    def test_up_and_down_cancel(self, running_game, input_state):
        """Test holding both keys leaves the paddle in place"""
        input_state.press("w")
        input_state.press("s")
        running_game.update()
        assert running_game.left_paddle.position.y == 250

    def test_paddles_stay_on_field(self, running_game, input_state):
        """Test holding a key for long stops at the edges"""
        input_state.press("w")
        input_state.press("ArrowDown")
        for _ in range(200):
            running_game.update()
        assert running_game.left_paddle.position.y == 0
        assert running_game.right_paddle.position.y == 500

    def test_keyboard_layout(self, running_game, input_state):
        """Test the left paddle follows the configured layout"""
        with game_config_tmp(KEYBOARD_LAYOUT="azerty"):
            input_state.press("w")
            running_game.update()
            assert running_game.left_paddle.position.y == 250

            input_state.press("z")
            running_game.update()
            assert running_game.left_paddle.position.y == 244


class TestPaddleBounce:
    """Test the ball bouncing off the paddles"""

    def test_left_paddle_center_hit(self, running_game):
        """Test a center hit sends the ball straight back"""
        ball = running_game.ball
        ball.position = Vector2D(31, 292.5)
        ball.velocity = Vector2D(-2, 0)

        events = running_game.update()

        assert events["paddle_hits"] == ["left"]
        assert ball.velocity.y == 0
        assert ball.velocity.x == 2
        assert ball.position.x == 30

    def test_left_paddle_hit_with_vertical_speed(self, running_game):
        """Test the incoming vertical speed is replaced, not reflected"""
        ball = running_game.ball
        ball.position = Vector2D(31, 290.5)
        ball.velocity = Vector2D(-2, 2)

        running_game.update()

        assert ball.velocity.x == 2
        assert ball.velocity.y == 0

    def test_right_paddle_center_hit(self, running_game):
        """Test the right paddle puts the ball back on its left face"""
        ball = running_game.ball
        ball.position = Vector2D(755, 292.5)
        ball.velocity = Vector2D(2, 0)

        events = running_game.update()

        assert events["paddle_hits"] == ["right"]
        assert ball.velocity.x == -2
        assert ball.velocity.y == 0
        assert ball.position.x == 755

    def test_top_edge_hit(self, running_game):
        """Test hitting the top end sends the ball up at full bounce speed"""
        ball = running_game.ball
        ball.position = Vector2D(31, 242.5)
        ball.velocity = Vector2D(-2, 0)

        running_game.update()

        assert ball.velocity.y == pytest.approx(-5)

    def test_bottom_half_hit(self, running_game):
        """Test the angle is proportional to the offset from the center"""
        ball = running_game.ball
        # Ball center 25px below the paddle center
        ball.position = Vector2D(31, 317.5)
        ball.velocity = Vector2D(-2, 0)

        running_game.update()

        assert ball.velocity.y == pytest.approx(2.5)
        assert ball.velocity.x == 2

    def test_miss(self, running_game):
        """Test a ball passing above the paddle is not bounced"""
        ball = running_game.ball
        ball.position = Vector2D(31, 200)
        ball.velocity = Vector2D(-2, 0)

        events = running_game.update()

        assert events["paddle_hits"] == []
        assert ball.velocity.x == -2


class TestScoring:
    """Test points and ball reset"""

    def test_right_player_scores(self, running_game):
        """Test the ball leaving on the left gives a point to the right player"""
        running_game.ball.position = Vector2D(-1, 300)
        running_game.ball.velocity = Vector2D(0, 0)

        events = running_game.update()

        assert events["goals"] == ["right"]
        assert running_game.right_player_score == 1
        assert running_game.left_player_score == 0
        assert running_game.ball.position.to_tuple() == (400, 300)
        assert running_game.ball.velocity.x in {-2, 2}
        assert running_game.ball.velocity.y in {-2, 2}

    def test_left_player_scores(self, running_game):
        """Test the ball leaving on the right gives a point to the left player"""
        running_game.ball.position = Vector2D(801, 300)
        running_game.ball.velocity = Vector2D(0, 0)

        events = running_game.update()

        assert events["goals"] == ["left"]
        assert running_game.left_player_score == 1
        assert running_game.right_player_score == 0
        assert running_game.ball.position.to_tuple() == (400, 300)

    def test_edges_are_not_goals(self, running_game):
        """Test x == 0 and x == width are still in play"""
        running_game.ball.position = Vector2D(0, 100)
        running_game.ball.velocity = Vector2D(0, 0)
        assert running_game.update()["goals"] == []

        running_game.ball.position = Vector2D(800, 100)
        assert running_game.update()["goals"] == []
        assert running_game.get_game_state()["score"] == (0, 0)

    def test_scores_drawn(self, running_game, recording_surface):
        """Test the score labels show the current score"""
        running_game.ball.position = Vector2D(-1, 300)
        running_game.ball.velocity = Vector2D(0, 0)
        running_game.step()

        texts = [call[1] for call in recording_surface.calls if call[0] == "fill_text"]
        assert texts == ["0", "1"]

    def test_long_session_invariants(self, recording_surface, input_state):
        """Test scores never decrease and paddles never leave the field"""
        game = PongGame(
            800, 600, input_state, Renderer(recording_surface, 800, 600), np.random.default_rng(7)
        )
        game.toggle_pause()
        rng = np.random.default_rng(3)
        keys = ["w", "s", "ArrowUp", "ArrowDown"]
        previous = (0, 0)

        for _ in range(3000):
            for key in keys:
                if rng.random() < 0.5:
                    input_state.press(key)
                else:
                    input_state.release(key)
            game.update()

            score = (game.left_player_score, game.right_player_score)
            assert score[0] >= previous[0]
            assert score[1] >= previous[1]
            previous = score
            for paddle in (game.left_paddle, game.right_paddle):
                assert 0 <= paddle.position.y <= 500
                assert paddle.height == 100
            assert game.ball.diameter == 15

    def test_reset_game(self, running_game, input_state):
        """Test restarting zeroes the score and recenters everything"""
        input_state.press("w")
        running_game.ball.position = Vector2D(-1, 300)
        running_game.ball.velocity = Vector2D(0, 0)
        running_game.update()
        assert running_game.right_player_score == 1

        running_game.reset_game()

        assert running_game.get_game_state()["score"] == (0, 0)
        assert running_game.left_paddle.position.y == 250
        assert running_game.ball.position.to_tuple() == (400, 300)
        assert not running_game.is_paused
