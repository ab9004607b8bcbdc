"""
Tests for challenge resolution and the bomb policy.
"""

import pytest

from bluff.core import (
    Card, GameState, Judge, Player, RandomSource, play_is_correct, MAX_BOMB_SURVIVALS
)
from tests.fakes import ScriptedRandom, BOMB, EXPLODE, NEVER_EXPLODE


@pytest.mark.parametrize("played, focus, expected", [
    ([Card.SUN], Card.SUN, True),
    ([Card.SUN, Card.SUN, Card.SUN], Card.SUN, True),
    ([Card.MAGIC], Card.MOON, True),
    ([Card.STAR, Card.MAGIC], Card.STAR, True),
    ([Card.MAGIC, Card.MAGIC], Card.SUN, True),
    ([Card.MOON], Card.SUN, False),
    ([Card.SUN, Card.STAR], Card.SUN, False),
    ([Card.MAGIC, Card.MOON], Card.STAR, False),
])
def test_play_is_correct(played, focus, expected):
    """Test that a play is correct iff every card is the focus or Magic."""
    assert play_is_correct(played, focus) is expected


@pytest.mark.parametrize("focus", [Card.SUN, Card.STAR, Card.MOON])
def test_empty_play_is_never_correct(focus):
    """Test that an empty or missing play cannot bluff its way to safety."""
    assert play_is_correct([], focus) is False
    assert play_is_correct(None, focus) is False


def test_bomb_survival_increments_count(game_state, judge):
    """Test that surviving a bomb adds one to the survive count."""
    player = game_state.players[1]
    
    assert judge.apply_bomb_risk(player) is False
    assert game_state.get_survive_count(player.player_id) == 1
    assert judge.apply_bomb_risk(player) is False
    assert game_state.get_survive_count(player.player_id) == 2
    assert player.is_alive


def test_third_bomb_always_explodes(game_state, judge, scripted_rng):
    """Test that the third risk eliminates without consulting the random source."""
    player = game_state.players[2]
    game_state.survive_counts[player.player_id] = MAX_BOMB_SURVIVALS
    scripted_rng.calls.clear()
    
    assert judge.apply_bomb_risk(player) is True
    
    assert not player.is_alive
    assert game_state.get_survive_count(player.player_id) == 0
    assert BOMB not in scripted_rng.calls
    assert any("3rd time bomb" in a for a in judge.announcements)


def test_bomb_explodes_on_one_in_three(game_config):
    """Test that a zero draw from [0, 2] eliminates the player."""
    state = GameState(rng=ScriptedRandom({BOMB: EXPLODE}))
    judge = Judge(state, game_config)
    player = state.players[3]
    state.survive_counts[player.player_id] = 1
    
    assert judge.apply_bomb_risk(player) is True
    assert not player.is_alive
    assert state.get_survive_count(player.player_id) == 0
    
    eliminations = [a for a in state.action_log if a["type"] == "player_eliminated"]
    assert eliminations[-1]["data"]["player"] == player.name


def test_survive_count_stays_within_bounds(game_config):
    """Test that across many games nobody survives more than two bombs."""
    for seed in range(200):
        state = GameState(rng=RandomSource(seed))
        judge = Judge(state, game_config)
        player = state.players[0]
        survived = 0
        
        while player.is_alive:
            exploded = judge.apply_bomb_risk(player)
            assert state.get_survive_count(player.player_id) in (0, 1, 2)
            if not exploded:
                survived += 1
        
        assert survived <= MAX_BOMB_SURVIVALS
        assert state.get_survive_count(player.player_id) == 0


def test_wrong_play_punishes_player(game_state, judge):
    """Test that an incorrect play puts the player who played at fault."""
    game_state.start_round(Card.SUN)
    challenger, played_by = game_state.players[2], game_state.players[1]
    played_by.record_play([Card.MOON, Card.SUN])
    
    result = judge.resolve_challenge(challenger, played_by)
    
    assert result.correct_play is False
    assert result.at_fault_id == played_by.player_id
    assert result.revealed == [Card.MOON, Card.SUN]
    assert result.round_over
    assert game_state.get_survive_count(played_by.player_id) == 1
    assert game_state.get_survive_count(challenger.player_id) == 0
    assert "Revealing cards of Bot1: Moon Sun" in judge.announcements


def test_correct_play_punishes_challenger(game_state, judge):
    """Test that questioning a correct play puts the challenger at fault."""
    game_state.start_round(Card.STAR)
    challenger, played_by = game_state.players[0], game_state.players[3]
    played_by.record_play([Card.STAR, Card.MAGIC])
    
    result = judge.resolve_challenge(challenger, played_by)
    
    assert result.correct_play is True
    assert result.at_fault_id == challenger.player_id
    assert game_state.get_survive_count(challenger.player_id) == 1
    assert "Human was wrong to question!" in judge.announcements


def test_challenge_hands_turn_to_challenger(game_state, judge):
    """Test that the challenger becomes the active player and the flag is set."""
    game_state.start_round(Card.MOON)
    game_state.active_index = 1
    challenger, played_by = game_state.players[2], game_state.players[1]
    played_by.record_play([Card.SUN])
    
    judge.resolve_challenge(challenger, played_by)
    
    assert game_state.active_index == 2
    assert game_state.any_challenge_this_round


def test_missing_play_is_revealed_as_no_record(game_state, judge):
    """Test that a player with no recorded play is treated as playing wrongly."""
    game_state.start_round(Card.SUN)
    challenger, played_by = game_state.players[1], game_state.players[0]
    
    result = judge.resolve_challenge(challenger, played_by)
    
    assert result.revealed == []
    assert result.correct_play is False
    assert "Revealing cards of Human: (no record of played cards)" in judge.announcements


def test_unknown_challenger_falls_back_to_first_player_with_cards(game_state, judge):
    """Test the fallback when the challenger is not seated at the table."""
    game_state.start_round(Card.SUN)
    game_state.players[0].set_hand([])
    game_state.players[1].set_hand([Card.SUN])
    played_by = game_state.players[3]
    played_by.record_play([Card.MOON])
    ghost = Player(player_id=99, name="Ghost")
    
    judge.resolve_challenge(ghost, played_by)
    
    assert game_state.active_index == 1


def test_unknown_challenger_with_nobody_to_act_falls_back_to_seat_zero(game_state, judge):
    game_state.start_round(Card.SUN)
    game_state.active_index = 3
    played_by = game_state.players[3]
    played_by.record_play([Card.MOON])
    
    judge.resolve_challenge(Player(player_id=99, name="Ghost"), played_by)
    
    assert game_state.active_index == 0


def test_announce_respects_config(game_state, capsys):
    """Test announcements are printed only when enabled but always recorded."""
    from bluff.config.game_config import GameConfig
    
    loud = Judge(game_state, GameConfig(use_judge_announcements=True))
    loud.announce("hello")
    assert "[JUDGE] hello" in capsys.readouterr().out
    
    quiet = Judge(game_state, GameConfig(use_judge_announcements=False))
    quiet.announce("shh")
    assert capsys.readouterr().out == ""
    assert quiet.announcements == ["shh"]


def test_listeners_hear_every_announcement(game_state):
    """Test registered listeners receive announcements whether or not they are printed."""
    from bluff.config.game_config import GameConfig
    
    heard = []
    quiet = Judge(game_state, GameConfig(use_judge_announcements=False))
    quiet.add_listener(heard.append)
    
    quiet.announce("Focus card: Moon")
    
    assert heard == ["Focus card: Moon"]
