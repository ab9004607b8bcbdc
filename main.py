"""
Main game loop for the bomb bluff card game.
"""

import argparse
import os
import random
from typing import Callable, Dict, Optional

from dotenv import load_dotenv

from bluff.core import GameState, Judge, Player, Card, RandomSource, FOCUS_CARDS
from bluff.agents import BaseAgent, BotAgent, HumanAgent
from bluff.phases import TurnHandler
from bluff.config import GameConfig, load_config


class BluffGame:
    """Main game controller."""
    
    def __init__(self, config: Optional[GameConfig] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 rng: Optional[RandomSource] = None):
        self.config = config or GameConfig()
        
        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)
        
        # One random source for the whole process
        self.rng = rng or RandomSource(self.config.random_seed)
        
        self.game_state = GameState(
            rng=self.rng,
            human_name=self.config.human_name,
            bot_names=list(self.config.bot_names),
        )
        self.judge = Judge(self.game_state, self.config, rng=self.rng)
        self.turn_handler = TurnHandler(self.game_state, self.judge)
        self.agents: Dict[int, BaseAgent] = {}
        
        self.input_func = input_func
        self.output_func = output_func
        self._initialize_agents()
    
    def _initialize_agents(self):
        """Seat 0 follows config.seat_agent_type, the other seats are bots."""
        human_seat, *bot_seats = self.game_state.players
        self.agents[human_seat.player_id] = self._create_agent(human_seat, self.config.seat_agent_type.lower())
        for player in bot_seats:
            self.agents[player.player_id] = self._create_agent(player, "bot")
        for agent in self.agents.values():
            self.judge.add_listener(agent.hear)
    
    def _create_agent(self, player: Player, agent_type: str) -> BaseAgent:
        """Create an agent of the specified type for a player."""
        if agent_type == "human":
            return HumanAgent(player, self.config, input_func=self.input_func, output_func=self.output_func)
        elif agent_type == "bot":
            return BotAgent(player, self.rng, self.config)
        else:
            raise ValueError(
                f"Unknown agent type: {agent_type}. "
                f"Must be 'human' or 'bot'"
            )
    
    def draw_focus_card(self) -> Card:
        """Uniform pick among Sun, Star and Moon."""
        return FOCUS_CARDS[self.rng.randint(0, len(FOCUS_CARDS) - 1)]
    
    def _show_hands(self) -> None:
        for agent in self.agents.values():
            agent.show_hand(self.game_state)
    
    def run_game(self) -> str:
        """
        Run rounds until at most one player is left.
        Returns the winner's name.
        """
        state = self.game_state
        
        if self.config.use_judge_announcements:
            print("=" * 60)
            print("BOMB BLUFF - Starting")
            print("=" * 60)
            print(f"Players: {[p.name for p in state.players]}")
            print("=" * 60)
            print()
        
        state.deal_new_hands()
        self._show_hands()
        self.judge.announce(f"First player: {state.active_player.name}")
        
        while not state.is_game_over():
            focus = self.draw_focus_card()
            state.start_round(focus)
            self.judge.announce(f"--- Round {state.round_number} begins! Focus card: {focus} ---")
            
            self.turn_handler.run_round(self.agents)
            
            self.judge.announce("ROUND OVER re-dealing cards.")
            state.end_round()
            self._show_hands()
        
        winner = state.end_game()
        if winner:
            self.judge.announce(f"{winner.name} wins!")
        if self.config.use_judge_announcements:
            self._print_game_summary()
        return winner.name if winner else "No winner"
    
    def _print_game_summary(self) -> None:
        """Print a nicely formatted game summary."""
        state = self.game_state
        
        print("\n" + "=" * 60)
        print("GAME SUMMARY")
        print("-" * 60)
        print(f"Winner: {state.winner.name if state.winner else 'None'}")
        print(f"Rounds Played: {state.round_number}")
        print(f"Random Seed: {self.config.random_seed}")
        
        print("\nPlayers:")
        for player in state.players:
            status = "alive" if player.is_alive else "eliminated"
            survived = state.get_survive_count(player.player_id)
            print(f"  • {player.name}: {status} (survive count: {survived})")
        print("=" * 60)
    
    def get_game_summary(self) -> Dict:
        """Get final game summary as dictionary."""
        return {
            "winner": self.game_state.winner.name if self.game_state.winner else None,
            "rounds": self.game_state.round_number,
            "random_seed": self.config.random_seed,
            "final_state": self.game_state.get_game_summary(),
            "action_log": self.game_state.action_log[-10:],  # Last 10 actions
        }


def main():
    """Entry point for running a game."""
    load_dotenv()
    
    parser = argparse.ArgumentParser(
        description="Play bomb bluff against three bots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                              # Play with the default table
  python main.py --config configs/table.yaml  # Custom names and bot behavior
  python main.py --seed 42                    # Reproducible shuffles and bot choices
  python main.py --autoplay --seed 7          # Watch four bots play
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.getenv("BLUFF_CONFIG"),
        help="Path to YAML configuration file (default: $BLUFF_CONFIG or built-in defaults)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=os.getenv("BLUFF_SEED"),
        help="Random seed for reproducible games (if not provided, one is generated and shown)"
    )
    parser.add_argument(
        "--autoplay",
        "-a",
        action="store_true",
        help="Seat a bot in place of the human player"
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress judge announcements (best used with --autoplay)"
    )
    
    args = parser.parse_args()
    
    config = load_config(args.config)
    config.random_seed = args.seed
    if args.autoplay:
        config.seat_agent_type = "bot"
    if args.quiet:
        config.use_judge_announcements = False
    
    if args.config:
        print(f"Using config: {args.config}")
    
    game = BluffGame(config=config)
    try:
        game.run_game()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")


if __name__ == "__main__":
    main()
