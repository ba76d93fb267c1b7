from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr
from typing import List, Optional

# 'MM-DD HH:mm', e.g. '05-20 14:30'
NODE_TIME_PATTERN = r"^(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01]) ([01]\d|2[0-3]):[0-5]\d$"


class AnalyzeRequest(BaseModel):
    query: str


class Node(BaseModel):
    id: str
    label: str
    group: StrictInt = Field(ge=1, le=3)  # 1 source, 2 spreader, 3 debunker
    time: str = Field(pattern=NODE_TIME_PATTERN)


class Link(BaseModel):
    source: str
    target: str
    value: StrictInt = Field(ge=1, le=5)


class GraphData(BaseModel):
    nodes: List[Node]
    links: List[Link] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    message: StrictStr
    isRumor: StrictBool
    graphData: Optional[GraphData] = None
