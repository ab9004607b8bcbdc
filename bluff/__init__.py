"""
Bomb bluff: a four-seat hidden-play card game with challenges and bomb risk.
"""
