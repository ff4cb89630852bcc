from unblock.engine.playback.playback import Move, apply_move, describe_move, describe_moves

__all__ = ["Move", "apply_move", "describe_move", "describe_moves"]
