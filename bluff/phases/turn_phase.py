"""
Turn handler: the per-round state machine of plays and challenges.
"""

from typing import Dict, List, Optional

from ..core import GameState, Judge, Player, Card, ChallengeResult
from ..agents import BaseAgent


class TurnHandler:
    """
    Runs the turns of one round.
    
    Each turn the active player plays face down, then the next player who
    can act decides whether to question that play. A round ends on the
    first challenge or when fewer than two players can act.
    """
    
    def __init__(self, game_state: GameState, judge: Judge):
        self.game_state = game_state
        self.judge = judge
        self.last_result: Optional[ChallengeResult] = None
    
    def run_round(self, agents: Dict[int, BaseAgent]) -> Optional[ChallengeResult]:
        """
        Play turns until the round is over.
        
        Returns:
            The challenge that ended the round, or None if the round ran out
            of players who can act
        """
        state = self.game_state
        self.last_result = None
        
        while True:
            if state.count_alive_with_cards() <= 1:
                break
            
            current = state.active_player
            if not current.can_act:
                if not self.skip_to_next_player():
                    break
                continue
            
            if self.take_turn(current, agents):
                break
            
            nxt = state.next_player_with_cards(state.active_index)
            if nxt is None:
                break
            state.active_index = nxt
        
        return self.last_result
    
    def skip_to_next_player(self) -> bool:
        """Move past a dead or empty-handed active player. False if nobody can act."""
        nxt = self.game_state.next_player_with_cards(self.game_state.active_index)
        if nxt is None:
            return False
        self.game_state.active_index = nxt
        return True
    
    def take_turn(self, player: Player, agents: Dict[int, BaseAgent]) -> bool:
        """
        Run one turn for the active player.
        
        Returns:
            True if the round is over
        """
        state = self.game_state
        self.play_cards(player, agents[player.player_id])
        
        nxt = state.next_player_with_cards(state.active_index)
        if nxt is None:
            return True
        challenger = state.players[nxt]
        
        if self.ask_for_challenge(challenger, player, agents[challenger.player_id]):
            return True
        
        if self.forced_challenge_applies(player):
            self.judge.announce(f"{challenger.name} is forced to question!")
            self.last_result = self.judge.resolve_challenge(challenger, player, forced=True)
            return True
        
        return False
    
    def play_cards(self, player: Player, agent: BaseAgent) -> List[Card]:
        """Take the agent's selection out of the hand and keep it hidden."""
        context = agent.build_context(self.game_state)
        selection = agent.choose_play(context)
        played = player.remove_cards(selection)
        player.record_play(played)
        
        self.judge.announce(f"{player.name} has played {len(played)} card(s) (hidden).")
        self.game_state._log_action("play", {"player": player.name, "count": len(played)})
        return played
    
    def ask_for_challenge(self, challenger: Player, played_by: Player, agent: BaseAgent) -> bool:
        """Let the next player question the play. True if a challenge was resolved."""
        context = agent.build_context(self.game_state, previous_player=played_by)
        if agent.decide_challenge(context):
            self.judge.announce(f"{challenger.name} decides to question!")
            self.last_result = self.judge.resolve_challenge(challenger, played_by)
            return True
        
        self.judge.announce(f"{challenger.name} decides NOT to question.")
        return False
    
    def forced_challenge_applies(self, previous: Player) -> bool:
        """
        Two players left, no challenge yet this round and the player who just
        played has emptied their hand: the other one must question.
        """
        state = self.game_state
        return (
            not state.any_challenge_this_round
            and state.count_alive() == 2
            and not previous.has_cards
        )
