"""
UCI Protocol Interface

This module implements the Universal Chess Interface (UCI) protocol,
which lets the engine talk to chess GUIs and match runners.

Protocol Flow:
    GUI → "uci"
    Engine → "id name Materialist 0.1.0"
    Engine → "id author tmforshaw"
    Engine → "uciok"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves e2e4"
    GUI → "go"
    Engine → "info depth 4 score cp 0 nodes 12345 time 850"
    Engine → "bestmove b8c6"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from materialist.uci.config import EngineConfig
from materialist.uci.interface import UCIEngine, main, setup_logger

__all__ = ['EngineConfig', 'UCIEngine', 'main', 'setup_logger']
