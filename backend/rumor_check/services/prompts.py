# backend/rumor_check/services/prompts.py
"""
Fixed prompt material for the rumor analysis call: the system instruction,
the per-claim user message and the JSON schema the reply must follow.
"""

from typing import Dict, Any

SYSTEM_INSTRUCTION = """你是一个专业的智慧谣言诊断系统。你的任务是分析用户输入的信息，判断其真伪，并可视化其传播路径。

回复原则：
1. **中文回复**：文字内容必须通俗易懂，逻辑严密。
2. **必须提供图谱数据**：除非用户输入完全无意义的字符，否则你应当尽力构建一个 'graphData' 对象来展示该信息（或类似谣言）是如何传播的。图谱对于用户的体验至关重要。
3. **图谱结构**：
   - Group 1: 谣言源头/最早发布者 (红色节点)
   - Group 2: 传播者/转发媒体/营销号 (橙色节点)
   - Group 3: 辟谣官方/权威媒体/查证结果 (蓝色节点)
4. **Markdown 优化**：在 'message' 字段中，使用加粗、列表和超链接来美化排版。"""

USER_PROMPT_TEMPLATE = """请对以下信息进行谣言诊断：{query}

要求：
1. 请给出详细的文字诊断报告（Markdown格式）。
2. **必须生成传播路径图数据 (graphData)**：
   - 如果是谣言：请根据该谣言的历史传播轨迹，生成 4-8 个关键节点。包括源头（如某网友/某自媒体）、关键传播节点（如营销号/转发大V）、以及最终的辟谣方（如官方通报/权威媒体）。
   - 如果是真实新闻：请生成其发酵传播的过程。
   - 如果无法获取确切数据：请基于谣言传播的典型规律构建一个合理的模拟传播路径，以便用户理解。
   - **时间字段 (time)**：所有节点必须包含具体的时间点，格式严格为 'MM-DD HH:mm'（例如 06-15 10:30）。时间应体现传播的先后顺序。

请严格遵守 JSON Schema 输出。"""

SCHEMA_NAME = "rumor_analysis"

_NODE_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "label": {
            "type": "string",
            "description": "Name of the platform, user, or entity (e.g. 'Weibo User A', 'Local News').",
        },
        "group": {
            "type": "integer",
            "description": "1 for source (Red), 2 for spreader (Orange), 3 for endpoint/debunker (Blue).",
        },
        "time": {
            "type": "string",
            "description": "Precise timestamp for this node's event. MUST be in format 'MM-DD HH:mm' (e.g. '05-20 14:30').",
        },
    },
    "required": ["id", "label", "group", "time"],
    "additionalProperties": False,
}

_LINK_SCHEMA = {
    "type": "object",
    "properties": {
        "source": {"type": "string", "description": "ID of source node"},
        "target": {"type": "string", "description": "ID of target node"},
        "value": {"type": "integer", "description": "Strength of link (1-5)"},
    },
    "required": ["source", "target", "value"],
    "additionalProperties": False,
}

# Strict structured outputs need every property listed in "required";
# graphData therefore stays required but may be null.
ANALYSIS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "message": {
            "type": "string",
            "description": "The formatted text response in Markdown. Use **bold** for key results and [Title](URL) for links.",
        },
        "isRumor": {
            "type": "boolean",
            "description": "True if the input is identified as a rumor or misinformation.",
        },
        "graphData": {
            "type": ["object", "null"],
            "description": "Propagation path data. REQUIRED for rumors or events with a timeline.",
            "properties": {
                "nodes": {"type": "array", "items": _NODE_SCHEMA},
                "links": {"type": "array", "items": _LINK_SCHEMA},
            },
            "required": ["nodes", "links"],
            "additionalProperties": False,
        },
    },
    "required": ["message", "isRumor", "graphData"],
    "additionalProperties": False,
}


def build_user_prompt(query: str) -> str:
    # the claim is forwarded verbatim, empty or not
    return USER_PROMPT_TEMPLATE.format(query=query)


def build_messages(query: str):
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {"role": "user", "content": build_user_prompt(query)},
    ]


def response_format() -> Dict[str, Any]:
    """Structured-output response_format for chat.completions.create."""
    return {
        "type": "json_schema",
        "json_schema": {"name": SCHEMA_NAME, "schema": ANALYSIS_SCHEMA, "strict": True},
    }
