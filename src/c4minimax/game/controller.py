from __future__ import annotations

from typing import Optional

from c4minimax.ai.base import Agent
from c4minimax.core.board import Board
from c4minimax.core.rules import OutcomeKind, winning_line
from c4minimax.game.actions import apply_move, new_game
from c4minimax.game.state import GameState
from c4minimax.types import Cell, Coord, Player, other
from c4minimax.ui.human import HumanAgent
from c4minimax.ui.render import ai_thinking, player_label, render


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_1: Agent, agent_2: Agent, current: Player) -> str:
    """Prepend a persistent header showing who plays which side."""
    header = (
        f"{player_label(Cell.HUMAN)}: {_agent_name(agent_1, 'Player 1')} | "
        f"{player_label(Cell.COMPUTER)}: {_agent_name(agent_2, 'Player 2')} | "
        f"Turn: {int(current)}"
    )
    if status:
        return f"{header}\n{status}"
    return header


def _search_status(agent: Agent, move_col: int) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {move_col}"
    return (
        f"{agent.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    agent_1: Agent,
    agent_2: Agent,
    show_thinking: bool = True,
    board: Optional[Board] = None,
) -> GameState:
    """
    Play one game in the terminal. Player 1 moves first.
    A board passed in is cleared first, so it can be reused for a restart.
    Returns the final state; its outcome is still in progress if a player quit.
    """
    if board is None:
        board = new_game()
    else:
        board.reset()
    state = GameState(board=board)
    highlight: Optional[list[Coord]] = None

    while True:
        render(
            state.board,
            _status_with_agents(state.last_status, agent_1, agent_2, state.current),
            highlight=highlight,
        )
        if state.outcome.is_over:
            return state

        agent = agent_1 if state.current == Cell.HUMAN else agent_2

        try:
            if isinstance(agent, HumanAgent):
                move = agent.ask_move(state, player_label(state.current))
                if move is None:
                    state.last_status = "Game quit."
                    render(
                        state.board,
                        _status_with_agents(state.last_status, agent_1, agent_2, state.current),
                    )
                    return state
                state.last_status = f"{player_label(state.current)} chose {int(move) + 1}"
            else:
                if show_thinking:
                    ai_thinking(agent.name)
                move = agent.choose_move(state)
                state.last_status = _search_status(agent, int(move) + 1)

            # Same path for humans and the computer
            result = apply_move(state.board, move, state.current)
            state.outcome = result.outcome

            if result.outcome.kind is OutcomeKind.WIN:
                highlight = winning_line(state.board, result.outcome.winner)
                state.last_status = f"{player_label(result.outcome.winner)} wins!"
            elif result.outcome.kind is OutcomeKind.TIE:
                state.last_status = "A tie! Game over."
            else:
                state.current = other(state.current)
                state.last_status += f" | Next: {player_label(state.current)}"

        except ValueError as e:
            state.last_status = str(e)
