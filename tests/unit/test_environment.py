"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest
from minefield import Action, ActionKind, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Seeded 9x9 environment."""
    environment = MinesweeperEnv(BoardConfig(9, 9), render_mode="ansi")
    environment.reset(seed=0)
    return environment


def _find(env: MinesweeperEnv, mine: bool):
    return next(
        (x, y) for x in range(9) for y in range(9)
        if env.board.cell(x, y).is_mine is mine
    )


class TestSpaces:
    """Test observation and action spaces."""

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=3)
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["total_safe"] == 73
        assert info["game_state"] == "PLAYING"

    def test_action_space_covers_three_kinds(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 3 * 81

    def test_encode_decode(self, env: MinesweeperEnv) -> None:
        action = Action(ActionKind.CHORD, 4, 7)
        assert env.decode_action(env.encode_action(action)) == action
        assert env.decode_action(10) == Action(ActionKind.REVEAL, 1, 1)

    def test_seeded_reset_is_reproducible(self) -> None:
        first = MinesweeperEnv(BoardConfig(9, 9))
        second = MinesweeperEnv(BoardConfig(9, 9))
        first.reset(seed=42)
        second.reset(seed=42)
        mines = [
            [first.board.cell(x, y).is_mine for y in range(9)] for x in range(9)
        ]
        assert mines == [
            [second.board.cell(x, y).is_mine for y in range(9)] for x in range(9)
        ]


class TestStep:
    """Test rewards and termination."""

    def test_flag_toggles(self, env: MinesweeperEnv) -> None:
        action = env.encode_action(Action(ActionKind.FLAG, 0, 0))
        obs, reward, terminated, _, info = env.step(action)
        assert obs[0, 0] == -2
        assert reward == 0.0
        assert terminated is False
        assert info["flags"] == 1
        obs, _, _, _, _ = env.step(action)
        assert obs[0, 0] == -1

    def test_noop_action_is_penalised(self, env: MinesweeperEnv) -> None:
        action = env.encode_action(Action(ActionKind.CHORD, 0, 0))
        _, reward, terminated, _, _ = env.step(action)
        assert reward == -0.1
        assert terminated is False

    def test_reveal_safe_cell(self, env: MinesweeperEnv) -> None:
        x, y = _find(env, mine=False)
        _, reward, _, _, info = env.step(
            env.encode_action(Action(ActionKind.REVEAL, x, y))
        )
        assert reward >= 1.0
        assert info["revealed"] >= 1

    def test_reveal_mine_terminates(self, env: MinesweeperEnv) -> None:
        x, y = _find(env, mine=True)
        _, reward, terminated, _, info = env.step(
            env.encode_action(Action(ActionKind.REVEAL, x, y))
        )
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"


    def test_opened_mine_not_counted_as_revealed(
        self, env: MinesweeperEnv
    ) -> None:
        x, y = _find(env, mine=True)
        _, _, _, _, info = env.step(
            env.encode_action(Action(ActionKind.REVEAL, x, y))
        )
        assert info["revealed"] == 0

    @pytest.mark.parametrize("action", [-1, 243, 1000])
    def test_action_outside_space_rejected(
        self, env: MinesweeperEnv, action: int
    ) -> None:
        with pytest.raises(ValueError, match="outside action space"):
            env.step(action)
        with pytest.raises(ValueError):
            env.decode_action(action)


class TestActionMask:
    """Test valid action masking."""

    def test_fresh_board_mask(self, env: MinesweeperEnv) -> None:
        mask = env.get_action_mask()
        assert mask.shape == (243,)
        assert mask[:162].all()
        assert not mask[162:].any()

    def test_revealed_cell_enables_chord(self, env: MinesweeperEnv) -> None:
        x, y = _find(env, mine=False)
        env.board.reveal(x, y)
        mask = env.get_action_mask()
        index = x * 9 + y
        assert not mask[index]
        assert not mask[81 + index]
        assert mask[162 + index]


def test_render_ansi(env: MinesweeperEnv) -> None:
    rendered = env.render()
    assert rendered.splitlines() == ["_ _ _ _ _ _ _ _ _"] * 9
