"""Output-side models: CSS rules and the stylesheet they accumulate into."""

from __future__ import annotations

from pydantic import BaseModel, Field

MIME_TYPE = "image/svg+xml"

RULE_TEMPLATE = (
    ".{selector} {{\n"
    "    background-image: url(data:{mime};base64,{payload});\n"
    "}}\n"
)


class CssRule(BaseModel):
    selector: str
    payload: str

    model_config = {"frozen": True}

    def render(self) -> str:
        return RULE_TEMPLATE.format(selector=self.selector, mime=MIME_TYPE, payload=self.payload)


class OutputDocument(BaseModel):
    """Ordered text blocks, one group per input file."""

    blocks: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    def extend(self, blocks: list[str]) -> OutputDocument:
        return OutputDocument(blocks=[*self.blocks, *blocks])

    def render(self) -> str:
        return "\n".join(self.blocks)
