from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """The only reply shape, for success and failure alike."""

    content: List[TextContent]

    @classmethod
    def of_text(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return self.content[0].text
