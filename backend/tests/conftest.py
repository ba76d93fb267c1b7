import json
from types import SimpleNamespace

import pytest

from rumor_check.services.llm_agent import AnalysisClient


class FakeCompletions:
    """Stands in for AsyncOpenAI().chat.completions."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.reply is not None and not isinstance(self.reply, str):
            content = json.dumps(self.reply, ensure_ascii=False)
        else:
            content = self.reply
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def make_client():
    """Build an AnalysisClient over a FakeCompletions transport; returns (client, completions)."""
    def _make(reply=None, error=None):
        completions = FakeCompletions(reply=reply, error=error)
        transport = SimpleNamespace(chat=SimpleNamespace(completions=completions))
        return AnalysisClient(model="test-model", client=transport), completions
    return _make


@pytest.fixture
def earthquake_reply():
    return {
        "message": "**结论**：该信息为谣言。\n\n- 官方已辟谣，详见 [应急管理部](https://www.mem.gov.cn)",
        "isRumor": True,
        "graphData": {
            "nodes": [
                {"id": "n1", "label": "某网友", "group": 1, "time": "06-15 10:30"},
                {"id": "n2", "label": "营销号A", "group": 2, "time": "06-15 11:05"},
                {"id": "n3", "label": "转发大V", "group": 2, "time": "06-15 12:40"},
                {"id": "n4", "label": "本地论坛", "group": 2, "time": "06-15 13:15"},
                {"id": "n5", "label": "地震局官方通报", "group": 3, "time": "06-15 16:00"},
            ],
            "links": [
                {"source": "n1", "target": "n2", "value": 3},
                {"source": "n2", "target": "n3", "value": 5},
                {"source": "n2", "target": "n4", "value": 2},
                {"source": "n3", "target": "n5", "value": 4},
            ],
        },
    }
