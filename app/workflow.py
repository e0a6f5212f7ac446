# workflow.py

import logging
from typing import Any

from langgraph.graph import END, START, StateGraph

from app.graph import (
    extract_node,
    make_generate_node,
    make_schedule_node,
    normalize_node,
    route_after_extract,
)
from app.meetings.store import MeetingStore
from app.nlu.generator import ChatClient
from app.state import ChatState

logger = logging.getLogger(__name__)


# Graph Builder ---------------------------------------------------------------------------


def build_graph(store: MeetingStore, chat_client: ChatClient):
    """
    normalize -> generate -> extract -> schedule (only when a meeting block
    was found) -> END
    """
    graph = StateGraph(ChatState)

    graph.add_node("normalize", normalize_node)
    graph.add_node("generate", make_generate_node(chat_client))
    graph.add_node("extract", extract_node)
    graph.add_node("schedule", make_schedule_node(store))

    graph.add_edge(START, "normalize")
    graph.add_edge("normalize", "generate")
    graph.add_edge("generate", "extract")
    graph.add_conditional_edges(
        "extract",
        route_after_extract,
        {
            "schedule": "schedule",
            "done": END,
        },
    )
    graph.add_edge("schedule", END)

    return graph.compile()


# Public Runner ---------------------------------------------------------------------------


async def run_chat(conversation_graph, message: str, history: Any) -> ChatState:
    """
    Run one chat turn through the graph.

    Exceptions (including upstream model failures) propagate to the caller.
    """
    result = await conversation_graph.ainvoke(
        {"message": message, "raw_history": history}
    )
    if isinstance(result, dict):
        return ChatState(**result)
    return result
