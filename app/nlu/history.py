import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

VALID_ROLES = {"user", "assistant"}
MODEL_ROLES = {"user": "user", "assistant": "model"}


def _is_valid_turn(turn: Any) -> bool:
    if not isinstance(turn, dict):
        return False
    role = turn.get("role")
    content = turn.get("content")
    return (
        isinstance(role, str)
        and role in VALID_ROLES
        and isinstance(content, str)
        and bool(content)
    )


def normalize_history(history: Any) -> List[Dict[str, Any]]:
    """
    Convert a caller transcript into chat-model history.

    Invalid turns are dropped. A single leading assistant turn is dropped so
    the history starts with the user. Never raises.

    Returns:
        list of {"role": "user" | "model", "parts": [{"text": ...}]}
    """
    if not isinstance(history, list) or not history:
        return []

    valid_turns = [turn for turn in history if _is_valid_turn(turn)]
    dropped = len(history) - len(valid_turns)
    if dropped:
        logger.debug("[NORMALIZE_HISTORY] Dropped %s invalid turn(s)", dropped)

    if valid_turns and valid_turns[0]["role"] == "assistant":
        logger.debug("[NORMALIZE_HISTORY] Dropped leading assistant turn")
        valid_turns = valid_turns[1:]

    return [
        {
            "role": MODEL_ROLES[turn["role"]],
            "parts": [{"text": turn["content"]}],
        }
        for turn in valid_turns
    ]
