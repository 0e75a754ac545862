"""
Materialist Chess Engine

A UCI chess engine that picks moves with a fixed-depth alpha-beta search
over a pure material evaluation.

## Architecture

The engine is organized into several key modules:

1. **board**: Board engine adapter over python-chess
   - Position setup from the start position or FEN
   - Legal move enumeration, reversible apply/undo
   - UCI move notation

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: P=100, N=320, B=330, R=500, Q=900

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning on a single shared board

4. **uci**: Universal Chess Interface protocol
   - UCI command handling
   - Compatible with chess GUIs

## Quick Start

### As a Python Library

```python
import chess
from materialist.search import search

board = chess.Board()
result = search(board, depth=3)
print(f"Best move: {result.move} (score: {result.score})")
```

### As a UCI Engine

```bash
python -m materialist.uci
```

Then connect with a chess GUI (Arena, CuteChess, etc.)

## Version

0.1.0
"""

__version__ = "0.1.0"
__author__ = "tmforshaw"
__license__ = "MIT"
