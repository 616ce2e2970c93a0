"""Core engine package.

This package contains the connectivity search, layout generation, hint
and shuffle operations, and the auto-play simulator.
"""
from .connectivity import find_connection_path, can_connect, count_turns
from .generator import generate_level, get_layout_mask
from .solver import find_available_match, is_deadlocked
from .shuffler import shuffle_tiles, shuffle_until_solvable
from .board import MatchResult, match_pair, select_tile, is_cleared
from .simulator import LevelSimulator, get_simulator

__all__ = [
    "find_connection_path",
    "can_connect",
    "count_turns",
    "generate_level",
    "get_layout_mask",
    "find_available_match",
    "is_deadlocked",
    "shuffle_tiles",
    "shuffle_until_solvable",
    "MatchResult",
    "match_pair",
    "select_tile",
    "is_cleared",
    "LevelSimulator",
    "get_simulator",
]
