from hanoi.backend.engine.gamestate.state import is_won, win_feedback

__all__ = ["is_won", "win_feedback"]
