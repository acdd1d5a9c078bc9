"""
Tests for the player ship, shots and hit detection.
"""

from invaders.frame import new_frame
from invaders.invaders import Invaders
from invaders.player import Player
from invaders.shot import Shot
from invaders.config import (
    NUM_COLS, PLAYER_ROW, MAX_SHOTS,
    PLAYER_CHAR, SHOT_CHAR, EXPLOSION_CHAR
)


class TestMovement:

    def test_starts_centered_on_bottom_row(self, player):
        assert player.x == NUM_COLS // 2
        assert player.y == PLAYER_ROW

    def test_move_left_stops_at_column_zero(self):
        player = Player(x=0)
        for _ in range(10):
            player.move_left()

        assert player.x == 0

    def test_move_right_stops_at_last_column(self):
        player = Player(x=NUM_COLS - 2)
        for _ in range(10):
            player.move_right()

        assert player.x == NUM_COLS - 1

    def test_column_stays_in_bounds_for_mixed_commands(self, player):
        commands = [player.move_left] * 30 + [player.move_right] * 80 + [player.move_left] * 7
        for command in commands:
            command()
            assert 0 <= player.x <= NUM_COLS - 1

        assert player.x == NUM_COLS - 1 - 7


class TestShooting:

    def test_shot_spawns_above_ship(self, player):
        assert player.shoot() is True

        shot = player.shots[0]
        assert (shot.x, shot.y) == (player.x, player.y - 1)
        assert not shot.exploding

    def test_shot_cap(self, player):
        """Firing at the cap is a no-op that reports False."""
        for _ in range(MAX_SHOTS):
            assert player.shoot() is True

        before = list(player.shots)
        assert player.shoot() is False
        assert player.shots == before
        assert len(player.shots) == MAX_SHOTS

    def test_shots_keep_fire_order(self, player):
        player.shoot()
        player.move_right()
        player.shoot()

        assert [shot.x for shot in player.shots] == [player.x - 1, player.x]

    def test_can_fire_again_after_shot_leaves(self):
        player = Player(y=2)
        player.shoot()
        player.shoot()
        player.update(0.11)

        assert player.shots == []
        assert player.shoot() is True


class TestShotUpdate:

    def test_shot_moves_one_row_per_step(self, player):
        player.shoot()
        start_y = player.shots[0].y

        player.update(0.03)
        assert player.shots[0].y == start_y

        player.update(0.03)
        assert player.shots[0].y == start_y - 1

    def test_large_delta_moves_several_rows(self, player):
        player.shoot()
        start_y = player.shots[0].y
        player.update(0.26)

        assert player.shots[0].y == start_y - 5

    def test_large_delta_cannot_skip_an_invader(self):
        """A shot crossing several rows in one tick still hits what it passed."""
        invaders = Invaders(cols=[20], rows=[17])
        player = Player(x=20, y=19)
        player.shoot()

        player.update(0.12)

        assert player.detect_hits(invaders) is True
        assert invaders.all_killed()
        shot = player.shots[0]
        assert shot.exploding
        assert (shot.x, shot.y) == (20, 17)

    def test_nearest_invader_on_the_path_is_hit_first(self):
        invaders = Invaders(cols=[5], rows=[10, 12])
        player = Player(x=5, y=15)
        player.shoot()

        player.update(0.26)

        assert player.detect_hits(invaders) is True
        assert [(i.x, i.y) for i in invaders] == [(5, 10)]
        assert player.shots[0].y == 12

    def test_shot_past_top_is_removed(self):
        player = Player(y=2)
        player.shoot()
        player.update(0.11)

        assert player.shots == []

    def test_exploding_shot_stays_put_then_retires(self):
        shot = Shot(5, 5)
        shot.explode()

        shot.update(0.2)
        assert (shot.x, shot.y) == (5, 5)
        assert not shot.dead

        shot.update(0.06)
        assert shot.dead


class TestDetectHits:

    def test_hit_is_resolved_atomically(self):
        """After a hit the invader is gone and the shot is exploding."""
        invaders = Invaders(cols=[5], rows=[3])
        player = Player(x=5, y=4)
        player.shoot()

        assert player.detect_hits(invaders) is True
        assert invaders.all_killed()
        assert player.shots[0].exploding

    def test_miss_changes_nothing(self):
        invaders = Invaders(cols=[6], rows=[3])
        player = Player(x=5, y=4)
        player.shoot()

        assert player.detect_hits(invaders) is False
        assert len(invaders) == 1
        assert not player.shots[0].exploding

    def test_exploding_shot_cannot_hit_again(self):
        player = Player(x=5, y=4)
        player.shoot()
        player.detect_hits(Invaders(cols=[5], rows=[3]))

        fresh = Invaders(cols=[5], rows=[3])
        assert player.detect_hits(fresh) is False
        assert len(fresh) == 1

    def test_two_shots_two_kills(self):
        invaders = Invaders(cols=[5], rows=[1, 3])
        player = Player(x=5, y=4)
        player.shoot()
        player.update(0.11)
        player.shoot()

        assert [shot.y for shot in player.shots] == [1, 3]
        assert player.detect_hits(invaders) is True
        assert invaders.all_killed()
        assert all(shot.exploding for shot in player.shots)


class TestPlayerDraw:

    def test_draws_ship_and_shots(self, player):
        player.shoot()
        frame = new_frame()
        player.draw(frame)

        assert frame.get(player.x, player.y).char == PLAYER_CHAR
        assert frame.get(player.x, player.y - 1).char == SHOT_CHAR

    def test_exploding_shot_uses_explosion_glyph(self, player):
        player.shoot()
        player.shots[0].explode()
        frame = new_frame()
        player.draw(frame)

        assert frame.get(player.x, player.y - 1).char == EXPLOSION_CHAR
