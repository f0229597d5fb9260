"""
English draughts (8x8 checkers) rules engine.

Board encoding (int8):
    0 = empty
    Positive = Human:     1 = man, 2 = king
    Negative = Automated: -1 = man, -2 = king

Human starts on rows 5-7 and moves up; Automated starts on rows 0-2 and moves
down. Captures are mandatory, a piece that can keep jumping must do so, and
crowning a man ends the turn immediately.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from checkers_ai.core.errors import InvariantViolation, RejectedMove
from checkers_ai.core.types import (
    BOARD_SIZE,
    DRAW_THRESHOLD,
    EMPTY,
    KING,
    Coord,
    Move,
    Outcome,
    Piece,
    Player,
    State,
)
from checkers_ai.games.game_base import GameBase
from checkers_ai.games.game_rules import (
    directions_for,
    in_bounds,
    initial_board,
    is_playable,
    owner_of,
    piece_of,
    promotion_row,
)
from checkers_ai.games.game_state import GameState


CELL_STRINGS = {
    0: ".",
    1: "h", 2: "H",
    -1: "a", -2: "A",
}


class Checkers(GameBase):
    """Rules engine: move generation, move application and termination."""

    __slots__ = ('state', 'draw_threshold')

    def __init__(self, state: Optional[GameState] = None, draw_threshold: int = DRAW_THRESHOLD):
        self.draw_threshold = draw_threshold
        if state is None:
            self.state = GameState(initial_board(), current_player=Player.HUMAN)
        else:
            self.set_state(state)

    def deep_clone(self) -> "Checkers":
        g = Checkers.__new__(Checkers)
        g.state = self.state.copy()
        g.draw_threshold = self.draw_threshold
        return g

    def snapshot(self) -> GameState:
        """Independent copy of the current position."""
        return self.state.copy()

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        """Adopt a copy of a position, recounting pieces and re-checking termination."""
        state = self.state = game_state.copy()
        state.human_pieces = int(np.count_nonzero(state.board > 0))
        state.automated_pieces = int(np.count_nonzero(state.board < 0))
        if state.winner is None:
            self._check_game_over()

    def current_player(self) -> Player:
        return self.state.current_player

    def piece_at(self, coord: Coord) -> Optional[Piece]:
        r, c = coord
        if not in_bounds(r, c):
            return None
        return piece_of(int(self.state.board[r, c]))

    def piece_counts(self) -> Dict[Player, int]:
        return {
            Player.HUMAN: self.state.human_pieces,
            Player.AUTOMATED: self.state.automated_pieces,
        }

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def valid_moves(self) -> List[Move]:
        return self.legal_moves(self.state.current_player)

    def legal_moves(self, side: Player) -> List[Move]:
        """
        All legal moves for `side`.

        If any capture exists only captures are returned. During a chain
        capture only the continuing piece may move, and only by jumping.
        Order is row, then column, then direction.
        """
        board = self.state.board
        forced = self.state.forced_continuation

        if forced is not None:
            owner = owner_of(int(board[forced]))
            if owner is not self.state.current_player:
                raise InvariantViolation(
                    f"Forced continuation square {forced} has no piece of the side to move",
                    details={"square": forced, "turn": self.state.current_player.name},
                )
            if owner is not side:
                return []
            jumps, _ = self._piece_moves(board, *forced)
            return jumps

        jumps: List[Move] = []
        steps: List[Move] = []

        for r, c in np.argwhere(board * side.value > 0):
            piece_jumps, piece_steps = self._piece_moves(board, int(r), int(c))
            if piece_jumps:
                jumps.extend(piece_jumps)
            elif not jumps:
                steps.extend(piece_steps)

        return jumps if jumps else steps

    @staticmethod
    def _piece_moves(board: np.ndarray, r: int, c: int) -> Tuple[List[Move], List[Move]]:
        """Return (jumps, steps) available to the piece on (r, c)."""
        code = int(board[r, c])
        jumps: List[Move] = []
        steps: List[Move] = []

        for dr, dc in directions_for(code):
            nr, nc = r + dr, c + dc
            if not in_bounds(nr, nc):
                continue

            target = int(board[nr, nc])
            if target == EMPTY:
                steps.append(Move((r, c), (nr, nc)))
            elif target * code < 0:
                jr, jc = nr + dr, nc + dc
                if in_bounds(jr, jc) and board[jr, jc] == EMPTY:
                    jumps.append(Move((r, c), (jr, jc), (nr, nc)))

        return jumps, steps

    def find_move(self, src: Coord, dst: Coord) -> Optional[Move]:
        """Resolve a from/to pair to the matching legal move, if any."""
        if self.is_over():
            return None
        for move in self.valid_moves():
            if move.src == tuple(src) and move.dst == tuple(dst):
                return move
        return None

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------

    def move_piece(self, src: Coord, dst: Coord) -> bool:
        """Apply the legal move from `src` to `dst`. Returns False if there is none."""
        move = self.find_move(src, dst)
        if move is None:
            return False
        self.apply_move(move, validated=True)
        return True

    def apply_move(self, move: Move, *, validated: bool = False) -> None:
        """Apply a move for the side to act.

        Args:
            move: The move to apply.
            validated:  If True, skip the legality lookup (caller guarantees
                        the move came from legal_moves() on this position).

        Raises:
            RejectedMove: if the game is over or the move is not legal.
                          The position is left untouched.
        """
        state = self.state
        if state.winner is not None:
            raise RejectedMove(
                f"Cannot apply {move}: the game is already over.",
                details={"outcome": state.winner.value},
            )

        if not validated and move not in self.legal_moves(state.current_player):
            raise RejectedMove(
                f"Illegal move {move} for {state.current_player.name}",
                details={"move": move},
            )

        board = state.board
        sr, sc = move.src
        tr, tc = move.dst
        code = int(board[sr, sc])
        mover = state.current_player
        was_king = abs(code) == KING

        board[tr, tc] = code
        board[sr, sc] = EMPTY

        ends_turn = True

        if move.captured is not None:
            board[move.captured] = EMPTY
            if mover is Player.HUMAN:
                state.automated_pieces -= 1
            else:
                state.human_pieces -= 1
            state.quiet_moves = 0

            further, _ = self._piece_moves(board, tr, tc)
            if further:
                state.forced_continuation = (tr, tc)
                ends_turn = False
            else:
                state.forced_continuation = None
        else:
            # Only king steps accumulate towards the draw.
            state.quiet_moves = state.quiet_moves + 1 if was_king else 0

        # Crowning always ends the turn, even mid-chain.
        if not was_king and tr == promotion_row(mover):
            board[tr, tc] = code * KING
            ends_turn = True

        if ends_turn:
            state.current_player = mover.opponent
            state.forced_continuation = None

        self._check_game_over()

    def _check_game_over(self) -> None:
        state = self.state
        if state.human_pieces == 0:
            state.winner = Outcome.AUTOMATED
        elif state.automated_pieces == 0:
            state.winner = Outcome.HUMAN
        elif not self.legal_moves(state.current_player):
            state.winner = Outcome.win_for(state.current_player.opponent)
        elif state.quiet_moves >= self.draw_threshold:
            state.winner = Outcome.DRAW

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_over(self) -> bool:
        return self.state.winner is not None

    def is_terminal(self) -> bool:
        return self.is_over()

    def outcome(self) -> Optional[Outcome]:
        return self.state.winner

    def get_result(self, player: Player) -> State:
        winner = self.state.winner
        if winner is None:
            return State.NEUTRAL
        if winner is Outcome.DRAW:
            return State.TIE
        if winner is Outcome.win_for(player):
            return State.WIN
        return State.LOSS

    def state_string(self) -> str:
        """Pretty-print the board with row/column indices."""
        board = self.state.board
        lines = ["   " + " ".join(str(c) for c in range(BOARD_SIZE))]

        for r in range(BOARD_SIZE):
            cells = [
                CELL_STRINGS[int(board[r, c])] if is_playable(r, c) else " "
                for c in range(BOARD_SIZE)
            ]
            lines.append(f"{r}  " + " ".join(cells))

        state = self.state
        lines.append(
            f"\nTurn: {state.current_player.name}  "
            f"Human: {state.human_pieces}  Automated: {state.automated_pieces}  "
            f"Quiet: {state.quiet_moves}"
        )
        if state.forced_continuation is not None:
            lines.append(f"Must keep jumping with {state.forced_continuation}")

        return "\n".join(lines)
